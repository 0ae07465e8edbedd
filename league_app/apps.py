# file: league_app/apps.py
"""App configuration for the league application.

Defines :class:`LeagueAppConfig`, the Django ``AppConfig`` that registers the
app, sets the default primary key type and wires signal receivers.

Key points:
    * ``name`` is fixed to ``"league_app"`` to keep the app label and import
      paths stable.
    * ``ready()`` imports :mod:`league_app.signals` so membership caches and
      user profiles stay in sync.
"""

from __future__ import annotations

from django.apps import AppConfig


# --- AppConfig -------------------------------------------------------------

class LeagueAppConfig(AppConfig):
    """App registration and defaults for ``league_app``."""

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "league_app"
    verbose_name: str = "College league"

    def ready(self) -> None:
        from . import signals  # noqa: F401
