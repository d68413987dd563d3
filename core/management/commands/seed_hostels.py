"""
Management command that loads demo accounts and hostel listings.

Safe to run repeatedly: accounts are matched by email and hostels by
(owner, name), so nothing is duplicated.
"""

import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from core.models import Hostel, User

logger = logging.getLogger(__name__)

OWNERS = [
    {"name": "Ali Khan", "email": "ali.owner@example.com", "password": "password123"},
    {"name": "Sara Ahmed", "email": "sara.owner@example.com", "password": "password123"},
    {"name": "Usman Malik", "email": "usman.owner@example.com", "password": "password123"},
]

ADMIN = {"name": "Admin", "email": "admin.pk@example.com", "password": "admin123"}
STUDENT = {"name": "ahad", "email": "ahad@gmail.com", "password": "1234"}

HOSTELS = [
    {
        "name": "Gulberg Boys Hostel",
        "address": "Near Liberty Market, Gulberg III, Lahore, Punjab, Pakistan",
        "city": "Lahore",
        "rent": 15000,
        "facilities": "Wifi, AC, Laundry, Mess, 24/7 Security",
        "owner": "ali.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "Johar Town Student Hostel",
        "address": "Block R1, Johar Town, Lahore, Punjab, Pakistan",
        "city": "Lahore",
        "rent": 12000,
        "facilities": "Wifi, Mess, Study Room, CCTV",
        "owner": "ali.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "DHA Girls Hostel",
        "address": "Phase 5, DHA, Lahore, Punjab, Pakistan",
        "city": "Lahore",
        "rent": 18000,
        "facilities": "Wifi, AC, Mess, Generator Backup, Laundry",
        "owner": "sara.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "G-10 Student Hostel",
        "address": "Street 43, Sector G-10/2, Islamabad, Pakistan",
        "city": "Islamabad",
        "rent": 14000,
        "facilities": "Wifi, Mess, Hot Water, UPS Backup",
        "owner": "usman.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "Blue Area Boys Hostel",
        "address": "Near Jinnah Avenue, Blue Area, Islamabad, Pakistan",
        "city": "Islamabad",
        "rent": 16000,
        "facilities": "Wifi, AC, Mess, Parking, 24/7 Security",
        "owner": "usman.owner@example.com",
        "is_verified": False,
    },
    {
        "name": "University Road Hostel",
        "address": "Near NIPA Chowrangi, University Road, Karachi, Sindh, Pakistan",
        "city": "Karachi",
        "rent": 13000,
        "facilities": "Wifi, Mess, Laundry, CCTV",
        "owner": "sara.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "PECHS Girls Hostel",
        "address": "Block 6, PECHS, Karachi, Sindh, Pakistan",
        "city": "Karachi",
        "rent": 17000,
        "facilities": "Wifi, AC, Mess, Generator Backup, Housekeeping",
        "owner": "sara.owner@example.com",
        "is_verified": True,
    },
    {
        "name": "Saddar Student Lodge",
        "address": "Near Mall Road, Saddar, Rawalpindi, Punjab, Pakistan",
        "city": "Rawalpindi",
        "rent": 11000,
        "facilities": "Wifi, Mess, Study Room, CCTV",
        "owner": "ali.owner@example.com",
        "is_verified": False,
    },
]


class Command(BaseCommand):
    help = "Create demo owners, an admin, a student and sample hostel listings"

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-hostels",
            action="store_true",
            help="Only create the demo accounts",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding demo data...")
        with transaction.atomic():
            for owner in OWNERS:
                self._ensure_user(owner, User.ROLE_OWNER)
            self._ensure_user(ADMIN, User.ROLE_ADMIN)
            self._ensure_user(STUDENT, User.ROLE_STUDENT)

            if options["skip_hostels"]:
                self.stdout.write(self.style.SUCCESS("Demo accounts ready (hostels skipped)."))
                return

            created = 0
            for entry in HOSTELS:
                if self._ensure_hostel(entry):
                    created += 1

        self.stdout.write(self.style.SUCCESS(f"Demo data ready: {created} new hostel(s)."))

    def _ensure_user(self, account, role):
        user = User.objects.filter(email=account["email"]).first()
        if user is not None:
            self.stdout.write(self.style.WARNING(f"Exists: {account['email']} ({user.role})"))
            return user

        user = User.objects.create_user(
            email=account["email"],
            password=account["password"],
            name=account["name"],
            role=role,
        )
        logger.info("Seeded %s account %s", role, user.email)
        self.stdout.write(self.style.SUCCESS(f"Created {role}: {account['email']} / {account['password']}"))
        return user

    def _ensure_hostel(self, entry):
        owner = User.objects.get(email=entry["owner"])
        fields = {key: value for key, value in entry.items() if key != "owner"}
        _, created = Hostel.objects.get_or_create(owner=owner, name=fields.pop("name"), defaults=fields)
        if created:
            logger.info("Seeded hostel %s for %s", entry["name"], owner.email)
        return created
