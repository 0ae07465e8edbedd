"""WSGI entry point for ``league_manager``."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "league_manager.settings")

application = get_wsgi_application()
