"""WSGI entry point for the HostelGo API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hostelgo_project.settings')

application = get_wsgi_application()
