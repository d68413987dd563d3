"""Core application data models exposed as a flat module-level API."""

from .booking import Booking
from .enquiry import Enquiry
from .hostel import Hostel
from .review import Review
from .user import User

__all__ = [
    "User",
    "Hostel",
    "Booking",
    "Review",
    "Enquiry",
]
