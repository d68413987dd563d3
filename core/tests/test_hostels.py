from rest_framework import status

from ..models import Booking, Hostel, Review
from .helpers import HostelGoTestCase


class HostelListingTests(HostelGoTestCase):
    def setUp(self):
        super().setUp()
        self.rival_hostel = self.make_hostel(
            self.other_owner,
            name="DHA Girls Hostel",
            city="Lahore",
            rent=18000,
            facilities="Wifi, AC, Mess",
            is_verified=True,
        )

    def ids(self, response):
        return [row["id"] for row in response.data]

    def test_student_sees_only_verified(self):
        response = self.client.get("/hostels", **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.ids(response), [self.rival_hostel.id, self.verified_hostel.id])
        self.assertTrue(all(row["is_verified"] == 1 for row in response.data))

    def test_owner_sees_only_own(self):
        response = self.client.get("/hostels", **self.creds(self.owner))
        self.assertEqual(self.ids(response), [self.pending_hostel.id, self.verified_hostel.id])

    def test_admin_sees_all(self):
        response = self.client.get("/hostels", **self.creds(self.admin))
        self.assertEqual(len(response.data), 3)

    def test_is_verified_is_an_integer(self):
        response = self.client.get(f"/hostels/{self.pending_hostel.id}", **self.creds(self.owner))
        self.assertEqual(response.data["is_verified"], 0)
        self.assertEqual(response.data["owner_id"], self.owner.id)


class HostelSearchTests(HostelGoTestCase):
    def setUp(self):
        super().setUp()
        self.make_hostel(self.owner, name="G-10", city="Islamabad", rent=14000, facilities="Hot Water", is_verified=True)
        self.make_hostel(self.owner, name="Pricey", city="Lahore", rent=30000, facilities="wifi, gym", is_verified=True)

    def names(self, response):
        return sorted(row["name"] for row in response.data)

    def test_city_filter(self):
        response = self.client.get("/hostels/search", {"city": "Islamabad"}, **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.names(response), ["G-10"])

    def test_max_rent_is_inclusive(self):
        response = self.client.get("/hostels/search", {"maxRent": "15000"}, **self.creds(self.student))
        self.assertEqual(self.names(response), ["G-10", "Gulberg Boys Hostel"])

    def test_facility_is_case_insensitive_substring(self):
        response = self.client.get("/hostels/search", {"facility": "WIFI"}, **self.creds(self.student))
        self.assertEqual(self.names(response), ["Gulberg Boys Hostel", "Pricey"])

    def test_filters_combine(self):
        response = self.client.get(
            "/hostels/search",
            {"city": "Lahore", "maxRent": "20000", "facility": "ac"},
            **self.creds(self.student),
        )
        self.assertEqual(self.names(response), ["Gulberg Boys Hostel"])

    def test_filters_never_widen_visibility(self):
        response = self.client.get("/hostels/search", {"city": "Rawalpindi"}, **self.creds(self.student))
        self.assertEqual(response.data, [])

    def test_invalid_max_rent_is_ignored(self):
        response = self.client.get("/hostels/search", {"maxRent": "cheap"}, **self.creds(self.student))
        self.assertEqual(self.names(response), ["G-10", "Gulberg Boys Hostel", "Pricey"])

    def test_owner_search_is_scoped(self):
        response = self.client.get("/hostels/search", {"city": "Rawalpindi"}, **self.creds(self.owner))
        self.assertEqual(self.names(response), ["Saddar Student Lodge"])
        response = self.client.get("/hostels/search", {"city": "Rawalpindi"}, **self.creds(self.other_owner))
        self.assertEqual(response.data, [])


class HostelDetailTests(HostelGoTestCase):
    def test_missing_hostel_is_404(self):
        response = self.client.get("/hostels/9999", **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Hostel not found")

    def test_student_cannot_view_unverified(self):
        response = self.client.get(f"/hostels/{self.pending_hostel.id}", **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "This hostel is not verified yet")

    def test_owner_cannot_view_others(self):
        response = self.client.get(f"/hostels/{self.verified_hostel.id}", **self.creds(self.other_owner))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You can only view your own hostels")

    def test_admin_views_any(self):
        response = self.client.get(f"/hostels/{self.pending_hostel.id}", **self.creds(self.admin))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Saddar Student Lodge")


class HostelManagementTests(HostelGoTestCase):
    payload = {
        "name": "Johar Town Student Hostel",
        "address": "Block R1, Johar Town",
        "city": "Lahore",
        "rent": 12000,
        "facilities": "Wifi, Mess",
    }

    def test_owner_creates_unverified_hostel(self):
        body = dict(self.payload, is_verified=1, owner_id=self.other_owner.id)
        response = self.client.post("/hostels", body, **self.creds(self.owner))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Hostel created successfully (pending verification)")
        self.assertEqual(response.data["hostel"]["is_verified"], 0)
        self.assertEqual(response.data["hostel"]["owner_id"], self.owner.id)

        hostel = Hostel.objects.get(pk=response.data["hostel"]["id"])
        self.assertFalse(hostel.is_verified)
        self.assertEqual(hostel.owner, self.owner)

    def test_create_requires_fields(self):
        response = self.client.post("/hostels", {"name": "Half"}, **self.creds(self.owner))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Name, address, city, and rent are required")

    def test_create_rejects_non_positive_rent(self):
        for rent in (0, -5, "abc", 10**20):
            response = self.client.post("/hostels", dict(self.payload, rent=rent), **self.creds(self.owner))
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "Rent must be a positive number")

    def test_admin_cannot_create(self):
        response = self.client.post("/hostels", self.payload, **self.creds(self.admin))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_owner_updates_subset_of_fields(self):
        response = self.client.put(
            f"/hostels/{self.verified_hostel.id}",
            {"rent": 16000},
            **self.creds(self.owner),
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Hostel updated successfully")
        self.verified_hostel.refresh_from_db()
        self.assertEqual(self.verified_hostel.rent, 16000)
        self.assertEqual(self.verified_hostel.name, "Gulberg Boys Hostel")
        self.assertTrue(self.verified_hostel.is_verified)

    def test_update_with_no_fields(self):
        response = self.client.put(f"/hostels/{self.verified_hostel.id}", {}, **self.creds(self.owner))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "No fields to update")

    def test_update_rejects_bad_rent(self):
        for rent in (0, 10**20):
            response = self.client.put(f"/hostels/{self.verified_hostel.id}", {"rent": rent}, **self.creds(self.owner))
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "Rent must be a positive number")

    def test_update_ignores_verification_flag(self):
        response = self.client.put(
            f"/hostels/{self.pending_hostel.id}",
            {"name": "Renamed", "is_verified": 1},
            **self.creds(self.owner),
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.pending_hostel.refresh_from_db()
        self.assertEqual(self.pending_hostel.name, "Renamed")
        self.assertFalse(self.pending_hostel.is_verified)

    def test_other_owner_cannot_update_or_delete(self):
        response = self.client.put(
            f"/hostels/{self.verified_hostel.id}",
            {"rent": 1},
            **self.creds(self.other_owner),
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You can only update your own hostels")

        response = self.client.delete(f"/hostels/{self.verified_hostel.id}", **self.creds(self.other_owner))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You can only delete your own hostels")
        self.assertTrue(Hostel.objects.filter(pk=self.verified_hostel.id).exists())

    def test_update_missing_hostel_is_404_before_403(self):
        response = self.client.put("/hostels/9999", {"rent": 1}, **self.creds(self.other_owner))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_cascades(self):
        self.make_booking(self.verified_hostel, self.student)
        Review.objects.create(hostel=self.verified_hostel, student=self.student, rating=5)
        self.make_enquiry(self.verified_hostel, self.student)

        response = self.client.delete(f"/hostels/{self.verified_hostel.id}", **self.creds(self.owner))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Hostel deleted successfully")
        self.assertFalse(Hostel.objects.filter(pk=self.verified_hostel.id).exists())
        self.assertFalse(Booking.objects.exists())
        self.assertFalse(Review.objects.exists())
