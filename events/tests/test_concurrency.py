import threading

from django.db import DatabaseError, connection
from django.test import TransactionTestCase

from core.errors import DomainError, DuplicateRegistration, EventFull
from events.models import EventBooking
from events.services import admission
from .utils import booking_fields, make_event


class ConcurrentAdmissionTests(TransactionTestCase):
    """
    Fires simultaneous submissions from separate threads (and therefore
    separate database connections) at one event.
    """

    def submit_all(self, event, national_ids):
        barrier = threading.Barrier(len(national_ids))
        outcomes = []
        lock = threading.Lock()

        def worker(national_id):
            try:
                barrier.wait()
                admission.submit_booking(event.id, booking_fields(national_id))
                result = "ok"
            except DomainError as exc:
                result = type(exc)
            except DatabaseError as exc:
                # Recorded so a lock timeout shows up in the assertion message
                result = repr(exc)
            finally:
                connection.close()
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker, args=(nid,)) for nid in national_ids]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return outcomes

    def test_capacity_holds_under_concurrent_submissions(self):
        capacity = 3
        event = make_event(max_participants=capacity)

        outcomes = self.submit_all(event, [str(i) for i in range(capacity + 5)])

        self.assertEqual(outcomes.count("ok"), capacity, outcomes)
        self.assertEqual(outcomes.count(EventFull), 5, outcomes)
        self.assertEqual(EventBooking.objects.filter(event=event).count(), capacity)

    def test_distinct_identities_below_capacity_all_succeed(self):
        event = make_event(max_participants=10)

        outcomes = self.submit_all(event, [str(i) for i in range(8)])

        self.assertEqual(outcomes, ["ok"] * 8)
        self.assertEqual(EventBooking.objects.filter(event=event).count(), 8)

    def test_concurrent_duplicates_admit_exactly_one(self):
        event = make_event()

        outcomes = self.submit_all(event, ["same-id"] * 6)

        self.assertEqual(outcomes.count("ok"), 1, outcomes)
        self.assertEqual(outcomes.count(DuplicateRegistration), 5, outcomes)
        self.assertEqual(EventBooking.objects.filter(event=event).count(), 1)
