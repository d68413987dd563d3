from rest_framework import ISO_8601, serializers

from ..models import Booking, Enquiry, Hostel, Review, User

RENT_ERROR = "Rent must be a positive number"
RATING_ERROR = "Rating must be between 1 and 5"
MAX_RENT = 2147483647
HOSTEL_REQUIRED = {"required": "Name, address, city, and rent are required"}
REVIEW_REQUIRED = "hostel_id and rating are required"
ENQUIRY_REQUIRED = "hostel_id and type are required"


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class UserSerializer(serializers.ModelSerializer):
    """Public account details; the password never leaves the server."""

    class Meta:
        model = User
        fields = ("id", "name", "email", "role", "contact_number")
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    # Presence is checked as a whole in validate() so a partial form gets one message.
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(max_length=254, required=False, allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, write_only=True)
    role = serializers.ChoiceField(
        choices=User.ROLE_CHOICES,
        required=False,
        allow_blank=True,
        error_messages={"invalid_choice": "Role must be 'student', 'owner', or 'admin'"},
    )
    contact_number = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        if not all(attrs.get(field) for field in ("name", "email", "password", "role")):
            raise serializers.ValidationError("All fields (name, email, password, role) are required")
        return attrs


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, write_only=True)

    def validate(self, attrs):
        if not attrs.get("email") or not attrs.get("password"):
            raise serializers.ValidationError("Email and password are required")
        return attrs


# ---------------------------------------------------------------------------
# Hostels
# ---------------------------------------------------------------------------


class HostelSerializer(serializers.ModelSerializer):
    is_verified = serializers.SerializerMethodField()

    class Meta:
        model = Hostel
        fields = ("id", "name", "address", "city", "rent", "facilities", "owner_id", "is_verified", "created_at")
        read_only_fields = fields

    def get_is_verified(self, obj: Hostel) -> int:
        return 1 if obj.is_verified else 0


class AdminHostelSerializer(HostelSerializer):
    owner_name = serializers.CharField(source="owner.name", read_only=True)
    owner_email = serializers.CharField(source="owner.email", read_only=True)
    owner_contact_number = serializers.SerializerMethodField()

    class Meta(HostelSerializer.Meta):
        fields = HostelSerializer.Meta.fields + ("owner_name", "owner_email", "owner_contact_number")
        read_only_fields = fields

    def get_owner_contact_number(self, obj: Hostel) -> str:
        return obj.owner.contact_number or ""


class HostelWriteSerializer(serializers.Serializer):
    """Validates hostel create payloads, and partial updates when ``partial=True``."""

    name = serializers.CharField(max_length=255, error_messages=HOSTEL_REQUIRED)
    address = serializers.CharField(error_messages=HOSTEL_REQUIRED)
    city = serializers.CharField(max_length=255, error_messages=HOSTEL_REQUIRED)
    rent = serializers.IntegerField(
        min_value=1,
        max_value=MAX_RENT,
        error_messages={
            **HOSTEL_REQUIRED,
            "min_value": RENT_ERROR,
            "max_value": RENT_ERROR,
            "invalid": RENT_ERROR,
            "max_string_length": RENT_ERROR,
        },
    )
    facilities = serializers.CharField(required=False, allow_blank=True, default="")


# ---------------------------------------------------------------------------
# Bookings
# ---------------------------------------------------------------------------


class BookingCreateSerializer(serializers.Serializer):
    hostel_id = serializers.IntegerField(error_messages={"required": "hostel_id is required"})


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Booking.STATUS_CHOICES,
        error_messages={
            "required": "Status must be 'pending', 'confirmed', or 'cancelled'",
            "invalid_choice": "Status must be 'pending', 'confirmed', or 'cancelled'",
        },
    )


class BookingSerializer(serializers.ModelSerializer):
    hostel_name = serializers.CharField(source="hostel.name", read_only=True)
    student_name = serializers.CharField(source="student.name", read_only=True)

    class Meta:
        model = Booking
        fields = ("id", "hostel_id", "student_id", "status", "created_at", "updated_at", "hostel_name", "student_name")
        read_only_fields = fields


class StudentBookingSerializer(serializers.ModelSerializer):
    """A student's booking joined with its hostel and the hostel's owner."""

    hostel_name = serializers.CharField(source="hostel.name", read_only=True)
    hostel_address = serializers.CharField(source="hostel.address", read_only=True)
    hostel_city = serializers.CharField(source="hostel.city", read_only=True)
    hostel_rent = serializers.IntegerField(source="hostel.rent", read_only=True)
    owner_name = serializers.CharField(source="hostel.owner.name", read_only=True)
    owner_email = serializers.CharField(source="hostel.owner.email", read_only=True)
    owner_contact_number = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = (
            "id",
            "hostel_id",
            "student_id",
            "status",
            "created_at",
            "updated_at",
            "hostel_name",
            "hostel_address",
            "hostel_city",
            "hostel_rent",
            "owner_name",
            "owner_email",
            "owner_contact_number",
        )
        read_only_fields = fields

    def get_owner_contact_number(self, obj: Booking) -> str:
        return obj.hostel.owner.contact_number or ""


class HostelBookingSerializer(serializers.ModelSerializer):
    """A hostel's booking joined with the student who made it."""

    student_name = serializers.CharField(source="student.name", read_only=True)
    student_email = serializers.CharField(source="student.email", read_only=True)
    student_contact_number = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = (
            "id",
            "hostel_id",
            "student_id",
            "status",
            "created_at",
            "updated_at",
            "student_name",
            "student_email",
            "student_contact_number",
        )
        read_only_fields = fields

    def get_student_contact_number(self, obj: Booking) -> str:
        return obj.student.contact_number or ""


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


class ReviewCreateSerializer(serializers.Serializer):
    hostel_id = serializers.IntegerField(error_messages={"required": REVIEW_REQUIRED})
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            "required": REVIEW_REQUIRED,
            "min_value": RATING_ERROR,
            "max_value": RATING_ERROR,
            "invalid": RATING_ERROR,
        },
    )
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=5,
        error_messages={"min_value": RATING_ERROR, "max_value": RATING_ERROR, "invalid": RATING_ERROR},
    )
    comment = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("At least one field (rating or comment) is required")
        return attrs


class ReviewSerializer(serializers.ModelSerializer):
    student_name = serializers.CharField(source="student.name", read_only=True)
    hostel_name = serializers.CharField(source="hostel.name", read_only=True)

    class Meta:
        model = Review
        fields = ("id", "rating", "comment", "hostel_id", "student_id", "created_at", "student_name", "hostel_name")
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Enquiries
# ---------------------------------------------------------------------------


class EnquiryCreateSerializer(serializers.Serializer):
    hostel_id = serializers.IntegerField(error_messages={"required": ENQUIRY_REQUIRED})
    type = serializers.ChoiceField(
        choices=Enquiry.TYPE_CHOICES,
        error_messages={
            "required": ENQUIRY_REQUIRED,
            "invalid_choice": "Type must be 'enquiry' or 'schedule_visit'",
        },
    )
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    scheduled_date = serializers.DateTimeField(
        required=False,
        allow_null=True,
        input_formats=[ISO_8601, "%Y-%m-%d"],
    )

    def validate(self, attrs):
        if attrs["type"] == Enquiry.TYPE_SCHEDULE_VISIT and not attrs.get("scheduled_date"):
            raise serializers.ValidationError("scheduled_date is required for schedule_visit")
        return attrs


class EnquiryReplySerializer(serializers.Serializer):
    reply = serializers.CharField(
        error_messages={
            "required": "Reply message is required",
            "blank": "Reply message is required",
            "null": "Reply message is required",
        },
    )


class EnquirySerializer(serializers.ModelSerializer):
    student_name = serializers.CharField(source="student.name", read_only=True)
    student_email = serializers.CharField(source="student.email", read_only=True)
    hostel_name = serializers.CharField(source="hostel.name", read_only=True)
    hostel_address = serializers.CharField(source="hostel.address", read_only=True)
    hostel_city = serializers.CharField(source="hostel.city", read_only=True)
    owner_name = serializers.CharField(source="hostel.owner.name", read_only=True)
    owner_email = serializers.CharField(source="hostel.owner.email", read_only=True)

    class Meta:
        model = Enquiry
        fields = (
            "id",
            "hostel_id",
            "student_id",
            "type",
            "message",
            "scheduled_date",
            "reply",
            "status",
            "created_at",
            "replied_at",
            "student_name",
            "student_email",
            "hostel_name",
            "hostel_address",
            "hostel_city",
            "owner_name",
            "owner_email",
        )
        read_only_fields = fields
