from django.contrib import admin
from django.contrib.auth import forms as auth_forms
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Booking, Enquiry, Hostel, Review, User


class UserCreationForm(auth_forms.UserCreationForm):
	class Meta(auth_forms.UserCreationForm.Meta):
		model = User
		fields = ('email', 'name', 'role', 'contact_number')
		field_classes = {}


class UserChangeForm(auth_forms.UserChangeForm):
	class Meta(auth_forms.UserChangeForm.Meta):
		model = User
		fields = '__all__'
		field_classes = {}


@admin.register(User)
class CustomUserAdmin(BaseUserAdmin):
	form = UserChangeForm
	add_form = UserCreationForm
	ordering = ('-id',)
	list_display = ('email', 'name', 'role', 'contact_number', 'is_staff')
	list_filter = ('role', 'is_staff', 'is_superuser', 'is_active')
	search_fields = ('email', 'name')
	fieldsets = (
		(None, {'fields': ('email', 'password')}),
		('Account', {'fields': ('name', 'role', 'contact_number')}),
		('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
		('Important dates', {'fields': ('last_login', 'date_joined')}),
	)
	add_fieldsets = (
		(
			None,
			{
				'classes': ('wide',),
				'fields': ('email', 'name', 'role', 'contact_number', 'password1', 'password2'),
			},
		),
	)


@admin.register(Hostel)
class HostelAdmin(admin.ModelAdmin):
	list_display = ('name', 'owner', 'city', 'rent', 'is_verified')
	list_filter = ('is_verified', 'city')
	search_fields = ('name', 'city', 'owner__name', 'owner__email')


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
	list_display = ('id', 'hostel', 'student', 'status', 'created_at')
	list_filter = ('status',)


@admin.register(Enquiry)
class EnquiryAdmin(admin.ModelAdmin):
	list_display = ('id', 'hostel', 'student', 'type', 'status', 'created_at')
	list_filter = ('type', 'status')


admin.site.register(Review)
