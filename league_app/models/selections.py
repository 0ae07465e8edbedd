# file: league_app/models/selections.py
"""Player selections assembled by league admins for a team or a sport."""

from __future__ import annotations

from django.conf import settings
from django.db import models


class PlayerSelection(models.Model):
    """A saved list of users picked for a team and/or a sport."""

    class Sport(models.TextChoices):
        """Sports offered by the league."""

        VALORANT = "Valorant", "Valorant"
        LEAGUE_OF_LEGENDS = "League of Legends", "League of Legends"
        CSGO = "CS:GO", "CS:GO"
        OVERWATCH = "Overwatch", "Overwatch"
        ROCKET_LEAGUE = "Rocket League", "Rocket League"

    name = models.CharField("Name", max_length=255, blank=True)
    sport = models.CharField("Sport", max_length=50, choices=Sport.choices, blank=True)
    team = models.ForeignKey(
        "league_app.Team",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="selections",
        verbose_name="Team",
    )
    players = models.ManyToManyField(
        settings.AUTH_USER_MODEL, related_name="player_selections", verbose_name="Players"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name="Created by",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Player selection"
        verbose_name_plural = "Player selections"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name or f"Selection #{self.pk}"
