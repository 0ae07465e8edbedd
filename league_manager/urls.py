# file: league_manager/urls.py
"""Project URL configuration for ``league_manager``.

Routes:
* Django admin with the Django JET skin and ``nested_admin`` helpers.
* Public site at root (``league_app.site.urls``).
* Authenticated portal under ``/portal/`` (``league_app.portal.urls``).
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import URLPattern, URLResolver, include, path

# --- URL patterns ----------------------------------------------------------

urlpatterns: list[URLPattern | URLResolver] = [
    path("jet/", include("jet.urls", "jet")),
    path("jet/dashboard/", include("jet.dashboard.urls", "jet-dashboard")),
    path("_nested_admin/", include("nested_admin.urls")),
    path("admin/", admin.site.urls),
    path("", include("league_app.site.urls")),          # public site
    path("portal/", include("league_app.portal.urls")),  # league office
]
