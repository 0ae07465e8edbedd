# file: league_app/tests/conftest.py
"""Common pytest fixtures for league_app tests.

Model classes are resolved dynamically via ``apps.get_model`` so fixtures do
not import the models module at collection time.

Fixtures:
    - ``Team``, ``Group``, ``Game``, ``Result``: Model classes.
    - ``teams``: Four saved teams (``A``..``D``).
    - ``make_game``: Factory for games between two teams.
    - ``office_user`` / ``student_user``: Accounts with matching league roles.
    - ``png_upload``: A tiny valid PNG as an uploaded file.
    - ``cloudinary_client``: ``httpx.Client`` answering like Cloudinary.
"""

from __future__ import annotations

import io
import json
from typing import Any, Callable

import httpx
import pytest
from django.apps import apps
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image

APP: str = "league_app"
SECURE_URL = "https://res.cloudinary.com/demo/image/upload/v1/league-loom/cover.png"


@pytest.fixture
def Team() -> Any:
    """Return the Team model class."""
    return apps.get_model(APP, "Team")


@pytest.fixture
def Group() -> Any:
    """Return the Group model class."""
    return apps.get_model(APP, "Group")


@pytest.fixture
def Game() -> Any:
    return apps.get_model(APP, "Game")


@pytest.fixture
def Result() -> Any:
    return apps.get_model(APP, "Result")


@pytest.fixture
def teams(Team: Any) -> list[Any]:
    """Create four teams named ``A``, ``B``, ``C`` and ``D``."""
    return [Team.objects.create(name=name, college=f"{name} College") for name in "ABCD"]


@pytest.fixture
def make_game(Game: Any) -> Callable[..., Any]:
    """Return a factory creating an upcoming game between two teams."""

    def _make(home: Any, away: Any, **extra: Any) -> Any:
        extra.setdefault("starts_at", timezone.now())
        return Game.objects.create(home_team=home, away_team=away, **extra)

    return _make


@pytest.fixture
def office_user(django_user_model: Any) -> Any:
    """A non-staff account holding the league admin role."""
    user = django_user_model.objects.create_user("office", email="office@example.com", password="pw-12345!")
    user.league_profile.role = "admin"
    user.league_profile.save()
    return user


@pytest.fixture
def student_user(django_user_model: Any) -> Any:
    return django_user_model.objects.create_user("student", email="student@example.com", password="pw-12345!")


@pytest.fixture
def png_upload() -> SimpleUploadedFile:
    """Return a 2x2 PNG wrapped as an uploaded file."""
    buf = io.BytesIO()
    Image.new("RGB", (2, 2), (200, 30, 30)).save(buf, format="PNG")
    return SimpleUploadedFile("cover.png", buf.getvalue(), content_type="image/png")


@pytest.fixture
def cloudinary_requests() -> list[httpx.Request]:
    """Requests captured by ``cloudinary_client``."""
    return []


@pytest.fixture
def cloudinary_client(cloudinary_requests: list[httpx.Request]) -> httpx.Client:
    """Client whose transport answers every upload with ``SECURE_URL``."""

    def handler(request: httpx.Request) -> httpx.Response:
        cloudinary_requests.append(request)
        return httpx.Response(200, content=json.dumps({"secure_url": SECURE_URL}))

    return httpx.Client(transport=httpx.MockTransport(handler))
