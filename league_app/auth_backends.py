# file: league_app/auth_backends.py
"""Authentication backend accepting a username **or** an e-mail address.

Enable it in settings before ``ModelBackend``::

    AUTHENTICATION_BACKENDS = [
        "league_app.auth_backends.UsernameOrEmailBackend",
        "django.contrib.auth.backends.ModelBackend",
    ]

Students usually sign in with their college e-mail, staff with a username.
Both are matched case-insensitively; with duplicate e-mails the oldest account
wins.
"""

from __future__ import annotations

from typing import Any, Optional

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth.base_user import AbstractBaseUser
from django.db.models import Q

UserModel = get_user_model()


class UsernameOrEmailBackend(ModelBackend):
    """Authenticate against ``username`` or ``email``.

    ``user_can_authenticate()`` is respected, so inactive users are rejected
    exactly as with ``ModelBackend``.
    """

    def authenticate(
        self,
        request: Any,
        username: Optional[str] = None,
        password: Optional[str] = None,
        **kwargs: Any,
    ) -> Optional[AbstractBaseUser]:  # type: ignore[override]
        login_value = username or kwargs.get("email")
        if not login_value or password is None:
            return None

        login_value = login_value.strip()
        user = (
            UserModel._default_manager
            .filter(Q(username__iexact=login_value) | Q(email__iexact=login_value))
            .order_by("id")
            .first()
        )
        if user is None:
            # Run the hasher once to keep timing similar to a failed check.
            UserModel().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
