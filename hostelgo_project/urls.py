# hostelgo_project/urls.py

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # /admin/ belongs to the API's moderation routes.
    path('django-admin/', admin.site.urls),
    path('', include('core.urls')),
]

handler404 = 'core.views.public.route_not_found'
