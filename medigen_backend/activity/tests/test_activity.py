# activity/tests/test_activity.py

from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from activity.models import ActivityLog
from activity.services import log_activity
from users.models import ROLE_ADMIN, User


class ActivityServiceTests(TestCase):
    def test_log_activity_creates_entry(self):
        entry = log_activity(
            category=ActivityLog.CATEGORY_LOGIN,
            message="User Login: Asha",
            actor_email="ASHA@example.com",
            ip_address="10.0.0.1",
        )

        self.assertIsNotNone(entry)
        self.assertEqual(entry.actor_email, "asha@example.com")
        self.assertFalse(entry.is_read)

    def test_log_activity_never_raises(self):
        with mock.patch.object(
            ActivityLog.objects, "create", side_effect=DatabaseError("down")
        ):
            self.assertIsNone(
                log_activity(category=ActivityLog.CATEGORY_LOGIN, message="x")
            )

    def test_entries_are_append_only(self):
        entry = log_activity(category=ActivityLog.CATEGORY_LOGIN, message="x")

        entry.message = "rewritten"
        with self.assertRaises(ValueError):
            entry.save()

        entry.refresh_from_db()
        entry.is_read = True
        entry.save(update_fields=["is_read"])
        entry.refresh_from_db()
        self.assertTrue(entry.is_read)


class ActivityAPITests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            email="admin@medigen.com", password="Admin@1234", role=ROLE_ADMIN
        )
        self.shopper = User.objects.create_user(
            email="shopper@example.com", password="Shop@1234"
        )
        self.login = log_activity(category=ActivityLog.CATEGORY_LOGIN, message="login")
        self.status_change = log_activity(
            category=ActivityLog.CATEGORY_ORDER_STATUS, message="status"
        )

    def test_admin_feed_newest_first(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/admin/activity/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        ids = [row["id"] for row in res.data["results"]]
        self.assertEqual(ids, [self.status_change.id, self.login.id])

    def test_filter_by_category(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/admin/activity/", {"category": "login"})
        self.assertEqual(res.data["count"], 1)

    def test_mark_read(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(f"/api/admin/activity/{self.login.id}/read/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["is_read"])

        res = self.client.get("/api/admin/activity/", {"is_read": "false"})
        self.assertEqual(res.data["count"], 1)

    def test_shopper_forbidden(self):
        self.client.force_authenticate(self.shopper)
        res = self.client.get("/api/admin/activity/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
