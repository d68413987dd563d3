"""Service banner and the JSON fallback for unknown routes."""

from django.urls import path, re_path

from ..views import public

urlpatterns = [
    path("", public.ApiRootView.as_view(), name="api_root"),
]

# Appended after every other module's patterns.
fallback_urlpatterns = [
    re_path(r"^.*$", public.route_not_found, name="route_not_found"),
]
