# league_app/context.py
"""Context processor exposing the league role of the current user.

Templates use ``league_role`` to pick navigation entries and
``is_league_admin`` to show office links. Anonymous users get ``None`` and
``False``.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import UserProfile


def _profile_for(user: Any) -> Optional[UserProfile]:
    """Return the user's profile or ``None`` for anonymous/profile-less users."""
    if not getattr(user, "is_authenticated", False):
        return None
    return UserProfile.objects.filter(user_id=user.pk).select_related("team").first()


def league_role(request: Any) -> dict[str, Any]:
    """Django context processor with ``league_role`` and ``is_league_admin``."""
    user = getattr(request, "user", None)
    profile = _profile_for(user)
    return {
        "league_profile": profile,
        "league_role": profile.role if profile else None,
        "is_league_admin": bool(
            getattr(user, "is_staff", False) or (profile is not None and profile.is_league_admin)
        ),
    }
