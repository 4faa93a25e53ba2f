from datetime import timedelta

from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from accounts.auth import issue_session_token
from accounts.models import User


class SignupFlowTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def signup(self, **overrides):
        payload = {"name": "A", "email": "a@x.com", "password": "secret1"}
        payload.update(overrides)
        return self.client.post("/users/signup", payload, format="json")

    def test_signup_returns_unverified_account_and_token(self):
        resp = self.signup(email="  A@X.com ")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

        body = resp.json()
        self.assertTrue(body["success"])
        self.assertTrue(body["token"])
        self.assertEqual(body["data"]["email"], "a@x.com")
        self.assertFalse(body["data"]["isVerified"])
        self.assertEqual(body["data"]["role"], "user")
        self.assertNotIn("password", body["data"])

        user = User.objects.get(email="a@x.com")
        self.assertIsNotNone(user.otp)
        self.assertNotEqual(user.password, "secret1")

    def test_signup_rejects_existing_email(self):
        self.signup()
        resp = self.signup(email="A@x.com")

        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.json()["msg"], "User already exists")
        self.assertEqual(resp.json()["error"], "account_exists")

    def test_signup_validates_fields(self):
        resp = self.signup(password="12345")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["msg"], "Password must be at least 6 characters")

        resp = self.signup(email="not-an-email")
        self.assertEqual(resp.json()["msg"], "Valid email is required")

        resp = self.client.post("/users/signup", {"email": "a@x.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.json()["msg"], "Name is required")
        self.assertFalse(resp.json()["success"])

    def test_full_onboarding_scenario(self):
        self.signup()
        user = User.objects.get(email="a@x.com")
        wrong = "100000" if user.otp != "100000" else "100001"

        resp = self.client.post("/users/verify", {"email": "a@x.com", "otp": wrong}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["msg"], "Invalid OTP")

        resp = self.client.post("/users/resend-otp", {"email": "a@x.com"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["msg"], "OTP sent successfully")

        user.refresh_from_db()
        resp = self.client.post("/users/verify", {"email": "a@x.com", "otp": user.otp}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["data"]["isVerified"])
        self.assertTrue(resp.json()["token"])

        resp = self.client.post("/users/login", {"email": "a@x.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["msg"], "Login successful")
        self.assertTrue(resp.json()["token"])

    def test_verify_and_resend_for_unknown_email(self):
        resp = self.client.post("/users/verify", {"email": "no@x.com", "otp": "123456"}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["msg"], "User not found")

        resp = self.client.post("/users/resend-otp", {"email": "no@x.com"}, format="json")
        self.assertEqual(resp.status_code, 404)


class LoginTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="b@x.com", password="secret1", name="B")

    def test_wrong_password(self):
        resp = self.client.post("/users/login", {"email": "b@x.com", "password": "nope123"}, format="json")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "Invalid credentials")

    def test_unknown_email_looks_the_same(self):
        resp = self.client.post("/users/login", {"email": "zz@x.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "Invalid credentials")

    def test_login_ignores_stale_token_header(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
        resp = self.client.post("/users/login", {"email": "b@x.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 200)

    def test_token_carries_account_id(self):
        resp = self.client.post("/users/login", {"email": "B@x.com", "password": "secret1"}, format="json")
        token = AccessToken(resp.json()["token"])
        # Recent simplejwt releases store the claim as a string
        self.assertEqual(str(token["id"]), str(self.user.id))


class SessionResolutionTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="c@x.com", password="secret1", name="C")
        self.token = issue_session_token(self.user)

    def current_user(self, **headers):
        return self.client.post("/users/currentUser", {}, format="json", **headers)

    def test_bearer_header(self):
        resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {self.token}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["email"], "c@x.com")
        self.assertEqual(resp.json()["token"], self.token)

    def test_bare_authorization_header(self):
        resp = self.current_user(HTTP_AUTHORIZATION=self.token)
        self.assertEqual(resp.status_code, 200)

    def test_alternate_header(self):
        resp = self.current_user(HTTP_X_AUTH_TOKEN=self.token)
        self.assertEqual(resp.status_code, 200)

    def test_no_token(self):
        resp = self.current_user()
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "No token provided, authorization denied")
        self.assertFalse(resp.json()["success"])

    def test_placeholder_tokens_count_as_missing(self):
        for placeholder in ("undefined", "null"):
            resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {placeholder}")
            self.assertEqual(resp.status_code, 401)
            self.assertEqual(resp.json()["msg"], "No token provided, authorization denied")

        # A placeholder bearer falls through to the alternate header
        resp = self.current_user(HTTP_AUTHORIZATION="Bearer undefined", HTTP_X_AUTH_TOKEN=self.token)
        self.assertEqual(resp.status_code, 200)

    def test_tampered_token(self):
        resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {self.token}x")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "Token is not valid")

    def test_expired_token(self):
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(minutes=1))

        resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "Token has expired")

    def test_deleted_account(self):
        self.user.delete()

        resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {self.token}")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["msg"], "User not found")

    def test_session_lifetime_is_thirty_days(self):
        token = AccessToken(self.token)
        lifetime = token["exp"] - token["iat"]
        self.assertEqual(lifetime, int(timedelta(days=30).total_seconds()))

    def test_string_id_claim_resolves_account(self):
        token = AccessToken.for_user(self.user)
        token["id"] = str(self.user.id)

        resp = self.current_user(HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["_id"], self.user.id)
