# users/tests/test_auth.py

from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()


class AdminLoginTests(TestCase):
    """
    Admin console sign-in.

    GUARANTEES:
    - Admins receive a JWT pair
    - Wrong credentials are rejected with 401
    - Non-admin accounts cannot sign in to the console
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            email="admin@aynbeauty.test",
            password="admin@123",
            role="admin",
        )
        self.customer = User.objects.create_user(
            email="shopper@aynbeauty.test",
            password="shopper@123",
        )

    def test_admin_login_returns_tokens(self):
        res = self.client.post(
            reverse("users:login"),
            {"email": "admin@aynbeauty.test", "password": "admin@123"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("access", res.data)
        self.assertIn("refresh", res.data)
        self.assertEqual(res.data["user"]["email"], "admin@aynbeauty.test")

    def test_wrong_password_is_rejected(self):
        res = self.client.post(
            reverse("users:login"),
            {"email": "admin@aynbeauty.test", "password": "nope"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data["detail"], "Invalid email or password.")

    def test_customer_cannot_use_console(self):
        res = self.client.post(
            reverse("users:login"),
            {"email": "shopper@aynbeauty.test", "password": "shopper@123"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_logout_blacklists_refresh_token(self):
        login = self.client.post(
            reverse("users:login"),
            {"email": "admin@aynbeauty.test", "password": "admin@123"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        res = self.client.post(
            reverse("users:logout"), {"refresh": login.data["refresh"]}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_205_RESET_CONTENT)

        again = self.client.post(
            reverse("users:logout"), {"refresh": login.data["refresh"]}, format="json"
        )
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST)


class ProfileTests(TestCase):
    """
    Admin profile page: read profile, change password.
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(
            email="owner@aynbeauty.test",
            password="old-secret",
            role="admin",
            first_name="Ayesha",
        )
        self.client.force_authenticate(user=self.admin)

    def test_me_returns_profile(self):
        res = self.client.get(reverse("users:me"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], "owner@aynbeauty.test")
        self.assertEqual(res.data["display_name"], "Ayesha")

    def test_change_password_success(self):
        res = self.client.post(
            reverse("users:password"),
            {
                "old_password": "old-secret",
                "new_password": "new-secret",
                "confirm_password": "new-secret",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.admin.refresh_from_db()
        self.assertTrue(self.admin.check_password("new-secret"))

    def test_wrong_old_password(self):
        res = self.client.post(
            reverse("users:password"),
            {
                "old_password": "guess",
                "new_password": "new-secret",
                "confirm_password": "new-secret",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Your old password is not correct.", res.data["old_password"])

    def test_confirmation_must_match(self):
        res = self.client.post(
            reverse("users:password"),
            {
                "old_password": "old-secret",
                "new_password": "new-secret",
                "confirm_password": "other-secret",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("confirm_password", res.data)

    def test_new_password_minimum_length(self):
        res = self.client.post(
            reverse("users:password"),
            {
                "old_password": "old-secret",
                "new_password": "abc",
                "confirm_password": "abc",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("new_password", res.data)


class EnsureSuperuserCommandTests(TestCase):
    def test_creates_admin(self):
        out = StringIO()
        call_command("ensure_superuser", email="Owner@AynBeauty.test", password="s3cret!!", stdout=out)

        owner = User.objects.get(email="owner@aynbeauty.test")
        self.assertTrue(owner.is_store_admin)
        self.assertTrue(owner.is_superuser)
        self.assertTrue(owner.check_password("s3cret!!"))
        self.assertNotIn("s3cret!!", out.getvalue())

    def test_refreshes_existing_account(self):
        User.objects.create_user(email="owner@aynbeauty.test", password="old-pass")

        call_command("ensure_superuser", email="owner@aynbeauty.test", password="new-pass", stdout=StringIO())

        owner = User.objects.get(email="owner@aynbeauty.test")
        self.assertEqual(owner.role, "admin")
        self.assertTrue(owner.check_password("new-pass"))
        self.assertEqual(User.objects.count(), 1)

    def test_without_credentials_does_nothing(self):
        call_command("ensure_superuser", email="", password="", stdout=StringIO())
        self.assertFalse(User.objects.exists())
