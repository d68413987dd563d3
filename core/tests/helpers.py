"""Shared fixtures for the API test cases."""

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from ..models import Booking, Enquiry, Hostel, User

PASSWORD = "secret123"


@override_settings(PASSWORD_HASHERS=["django.contrib.auth.hashers.MD5PasswordHasher"])
class HostelGoTestCase(TestCase):
    """Two owners, two students and an admin, plus one verified and one pending hostel."""

    def setUp(self):
        self.client = APIClient()

        self.owner = self.make_user("Ali Khan", "ali.khan@example.com", User.ROLE_OWNER, contact_number="03001234567")
        self.other_owner = self.make_user("Sara Ahmed", "sara.ahmed@example.com", User.ROLE_OWNER)
        self.student = self.make_user("Ahad", "ahad@example.com", User.ROLE_STUDENT, contact_number="03111111111")
        self.other_student = self.make_user("Zara", "zara@example.com", User.ROLE_STUDENT)
        self.admin = self.make_user("Admin", "admin@example.com", User.ROLE_ADMIN)

        self.verified_hostel = self.make_hostel(
            self.owner,
            name="Gulberg Boys Hostel",
            city="Lahore",
            rent=15000,
            facilities="Wifi, AC, Laundry",
            is_verified=True,
        )
        self.pending_hostel = self.make_hostel(
            self.owner,
            name="Saddar Student Lodge",
            city="Rawalpindi",
            rent=11000,
            facilities="Wifi, Mess",
            is_verified=False,
        )

    def make_user(self, name, email, role, password=PASSWORD, **extra):
        return User.objects.create_user(email=email, password=password, name=name, role=role, **extra)

    def make_hostel(self, owner, **fields):
        defaults = {
            "name": "Test Hostel",
            "address": "Street 1, Test Town",
            "city": "Lahore",
            "rent": 10000,
            "facilities": "",
            "is_verified": False,
        }
        defaults.update(fields)
        return Hostel.objects.create(owner=owner, **defaults)

    def make_booking(self, hostel, student, status=Booking.STATUS_PENDING):
        return Booking.objects.create(hostel=hostel, student=student, status=status)

    def make_enquiry(self, hostel, student, **fields):
        defaults = {"type": Enquiry.TYPE_ENQUIRY, "message": "Is there a mess?"}
        defaults.update(fields)
        return Enquiry.objects.create(hostel=hostel, student=student, **defaults)

    def creds(self, user, password=PASSWORD):
        return {"HTTP_X_USER_EMAIL": user.email, "HTTP_X_USER_PASSWORD": password}
