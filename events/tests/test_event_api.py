from django.test import TestCase
from rest_framework import status

from accounts.models import User
from events.models import Event
from .utils import client_for, make_event, make_user


EVENT_PAYLOAD = {
    "title": "AI Day",
    "mainTitle": "Machine learning for everyone",
    "description": "<p>Talks <script>alert(1)</script>and demos</p>",
    "date": "5 April",
    "eventDate": "2030-04-05T10:00:00Z",
    "locationEvent": "Main Hall",
    "maxParticipants": 100,
    "registrationFee": "25.50",
}


class PublicEventApiTests(TestCase):
    def setUp(self):
        self.owner = make_user(User.ROLE_EDITOR)
        self.active = make_event(owner=self.owner, title="Active")
        self.retired = make_event(owner=self.owner, title="Retired", status=Event.STATUS_RETIRED)

    def test_listing_is_public_and_hides_owner(self):
        resp = client_for().get("/events")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)

        data = resp.json()["data"]
        self.assertEqual([e["title"] for e in data], ["Active"])
        self.assertNotIn("createdBy", data[0])
        self.assertEqual(data[0]["_id"], self.active.id)
        self.assertEqual(data[0]["mainTitle"], "Build your first robot")
        self.assertTrue(data[0]["isActive"])

    def test_user_events_alias(self):
        resp = client_for().get("/users/events?type=upcoming")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["data"]), 1)

    def test_past_filter(self):
        make_event(title="Old", is_upcoming=False)
        resp = client_for().get("/events?type=past")
        self.assertEqual([e["title"] for e in resp.json()["data"]], ["Old"])

    def test_bad_token_does_not_break_public_reads(self):
        client = client_for()
        client.credentials(HTTP_AUTHORIZATION="Bearer broken")
        self.assertEqual(client.get("/events").status_code, 200)
        self.assertEqual(client.get(f"/events/{self.active.id}").status_code, 200)

    def test_retired_event_still_addressable(self):
        resp = client_for().get(f"/events/{self.retired.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["data"]["isActive"])
        self.assertNotIn("createdBy", resp.json()["data"])

    def test_missing_event(self):
        resp = client_for().get("/events/999999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["msg"], "Event not found")


class EventManagementApiTests(TestCase):
    def setUp(self):
        self.admin = make_user(User.ROLE_ADMIN)
        self.editor = make_user(User.ROLE_EDITOR)
        self.user = make_user(User.ROLE_USER)
        self.event = make_event(owner=self.admin)

    def test_create_requires_session(self):
        resp = client_for().post("/events", EVENT_PAYLOAD, format="json")
        self.assertEqual(resp.status_code, 401)

    def test_create_requires_operator_role(self):
        resp = client_for(self.user).post("/events", EVENT_PAYLOAD, format="json")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["msg"], "Access denied. Insufficient permissions.")

    def test_editor_creates_event(self):
        resp = client_for(self.editor).post("/events", EVENT_PAYLOAD, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

        body = resp.json()
        self.assertEqual(body["msg"], "Event created successfully")
        self.assertEqual(body["data"]["locationEvent"], "Main Hall")
        self.assertEqual(body["data"]["maxParticipants"], 100)
        self.assertEqual(body["data"]["registrationFee"], 25.5)
        self.assertNotIn("<script>", body["data"]["description"])

        event = Event.objects.get(pk=body["data"]["_id"])
        self.assertEqual(event.created_by, self.editor)

    def test_create_reports_first_missing_field(self):
        payload = dict(EVENT_PAYLOAD)
        del payload["title"]
        del payload["date"]

        resp = client_for(self.admin).post("/events", payload, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["msg"], "Title is required")

    def test_create_rejects_bad_event_date(self):
        payload = dict(EVENT_PAYLOAD, eventDate="someday")
        resp = client_for(self.admin).post("/events", payload, format="json")
        self.assertEqual(resp.json()["msg"], "Valid event date is required")

    def test_create_rejects_negative_fee(self):
        payload = dict(EVENT_PAYLOAD, registrationFee="-1")
        resp = client_for(self.admin).post("/events", payload, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["msg"], "Registration fee cannot be negative")

    def test_patch_is_partial_and_allow_listed(self):
        resp = client_for(self.editor).patch(
            f"/events/{self.event.id}",
            {"title": "New title", "createdBy": self.editor.id, "_id": 77},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["title"], "New title")

        self.event.refresh_from_db()
        self.assertEqual(self.event.created_by, self.admin)
        self.assertEqual(self.event.description, "Hands-on session")

    def test_patch_is_active_toggles_status(self):
        client = client_for(self.editor)

        client.patch(f"/events/{self.event.id}", {"isActive": False}, format="json")
        self.event.refresh_from_db()
        self.assertEqual(self.event.status, Event.STATUS_RETIRED)

        resp = client.patch(f"/events/{self.event.id}", {"isActive": True}, format="json")
        self.assertTrue(resp.json()["data"]["isActive"])

    def test_patch_clears_capacity_with_null(self):
        self.event.max_participants = 5
        self.event.save()

        client_for(self.admin).patch(f"/events/{self.event.id}", {"maxParticipants": None}, format="json")
        self.event.refresh_from_db()
        self.assertIsNone(self.event.max_participants)

    def test_patch_forbidden_for_users(self):
        resp = client_for(self.user).patch(f"/events/{self.event.id}", {"title": "x"}, format="json")
        self.assertEqual(resp.status_code, 403)

    def test_delete_is_admin_only(self):
        resp = client_for(self.editor).delete(f"/events/{self.event.id}")
        self.assertEqual(resp.status_code, 403)
        self.event.refresh_from_db()
        self.assertTrue(self.event.is_active)

    def test_delete_retires(self):
        resp = client_for(self.admin).delete(f"/events/{self.event.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["msg"], "Event deleted successfully")

        self.assertTrue(Event.objects.filter(pk=self.event.id).exists())
        listing = client_for().get("/events").json()["data"]
        self.assertNotIn(self.event.id, [e["_id"] for e in listing])

    def test_delete_missing_event(self):
        resp = client_for(self.admin).delete("/events/999999")
        self.assertEqual(resp.status_code, 404)
