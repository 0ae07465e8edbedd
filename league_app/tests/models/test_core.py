# file: league_app/tests/models/test_core.py
"""Model-level tests for teams, groups and user profiles."""

from __future__ import annotations

from typing import Any

import pytest
from django.db import IntegrityError

from league_app.models import UserProfile

pytestmark = pytest.mark.django_db


def test_team_name_is_unique(Team: Any) -> None:
    Team.objects.create(name="Owls")
    with pytest.raises(IntegrityError):
        Team.objects.create(name="Owls")


def test_groups_are_listed_in_declaration_order(Group: Any) -> None:
    names = ["Zeta", "Alpha", "Mid"]
    for name in names:
        Group.objects.create(name=name)
    assert list(Group.objects.values_list("name", flat=True)) == names


def test_new_user_gets_student_profile(django_user_model: Any) -> None:
    user = django_user_model.objects.create_user("kim", password="pw-12345!")
    profile = user.league_profile
    assert profile.role == UserProfile.Role.STUDENT
    assert not profile.is_league_admin


def test_superuser_gets_admin_profile(django_user_model: Any) -> None:
    user = django_user_model.objects.create_superuser("root", "root@example.com", "pw-12345!")
    assert user.league_profile.role == UserProfile.Role.ADMIN
    assert user.league_profile.is_league_admin


def test_deleting_team_keeps_member_profiles(Team: Any, student_user: Any) -> None:
    team = Team.objects.create(name="Owls")
    profile = student_user.league_profile
    profile.team = team
    profile.save()

    team.delete()

    profile.refresh_from_db()
    assert profile.team is None
