"""
ASGI config for the hotels API project.

Serves plain HTTP through Django; there are no WebSocket routes.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hotelapi.settings")

application = get_asgi_application()
