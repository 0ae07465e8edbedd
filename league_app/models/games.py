# file: league_app/models/games.py
"""Fixture and result models.

Contains:
* :class:`GameStatus` – lifecycle of a fixture.
* :class:`Game` – scheduled match between two teams.
* :class:`Result` – final score of a match with optional point overrides.

A result keeps its own ``home_team``/``away_team`` references so standings can
be computed without touching games. Deleting a team nulls the reference and
the result is then skipped by the standings aggregator.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.urls import reverse


# --- Status enum -----------------------------------------------------------


class GameStatus(models.TextChoices):
    """Lifecycle of a game."""

    UPCOMING = "Upcoming", "Upcoming"
    LIVE = "Live", "Live"
    FINISHED = "Finished", "Finished"


# --- Game ------------------------------------------------------------------


class Game(models.Model):
    """A scheduled game between two different teams."""

    home_team = models.ForeignKey(
        "league_app.Team",
        on_delete=models.CASCADE,
        related_name="games_home",
        verbose_name="Home team",
    )
    away_team = models.ForeignKey(
        "league_app.Team",
        on_delete=models.CASCADE,
        related_name="games_away",
        verbose_name="Away team",
    )
    starts_at = models.DateTimeField("Kick-off")
    status = models.CharField(
        "Status", max_length=20, choices=GameStatus.choices, default=GameStatus.UPCOMING
    )
    venue = models.CharField("Venue", max_length=255, blank=True, null=True)

    class Meta:
        verbose_name = "Game"
        verbose_name_plural = "Games"
        ordering = ("starts_at", "id")

    def clean(self) -> None:
        """Validate that the two sides differ.

        Raises:
            ValidationError: If home and away team are the same.
        """
        if self.home_team_id and self.home_team_id == self.away_team_id:
            raise ValidationError("Home and away team must be different.")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.home_team} vs {self.away_team} ({self.starts_at:%Y-%m-%d %H:%M})"

    def get_absolute_url(self) -> str:  # pragma: no cover - simple helper
        return reverse("site:matches") + f"#game-{self.pk}"


# --- Result ----------------------------------------------------------------


class Result(models.Model):
    """Final score of a match.

    ``home_points``/``away_points`` are explicit overrides. When left empty the
    standard 3/1/0 rule applies during aggregation.
    """

    game = models.OneToOneField(
        Game,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="result",
        verbose_name="Game",
    )
    home_team = models.ForeignKey(
        "league_app.Team",
        on_delete=models.SET_NULL,
        null=True,
        related_name="results_home",
        verbose_name="Home team",
    )
    away_team = models.ForeignKey(
        "league_app.Team",
        on_delete=models.SET_NULL,
        null=True,
        related_name="results_away",
        verbose_name="Away team",
    )
    home_score = models.PositiveIntegerField("Home score", default=0)
    away_score = models.PositiveIntegerField("Away score", default=0)
    home_points = models.PositiveSmallIntegerField("Home points", blank=True, null=True)
    away_points = models.PositiveSmallIntegerField("Away points", blank=True, null=True)
    home_yellow_cards = models.PositiveSmallIntegerField("Home yellow cards", default=0)
    away_yellow_cards = models.PositiveSmallIntegerField("Away yellow cards", default=0)
    home_red_cards = models.PositiveSmallIntegerField("Home red cards", default=0)
    away_red_cards = models.PositiveSmallIntegerField("Away red cards", default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Result"
        verbose_name_plural = "Results"
        ordering = ("id",)

    def clean(self) -> None:
        """Validate team distinctness and consistency with the attached game.

        Raises:
            ValidationError: If both sides are the same team or the teams do
            not match the game.
        """
        if self.home_team_id and self.home_team_id == self.away_team_id:
            raise ValidationError("Home and away team must be different.")

        if self.game_id and self.home_team_id and self.away_team_id:
            if (self.home_team_id, self.away_team_id) != (self.game.home_team_id, self.game.away_team_id):
                raise ValidationError("Result teams must match the teams of the game.")

    @property
    def home_goal_difference(self) -> int:
        return self.home_score - self.away_score

    @property
    def away_goal_difference(self) -> int:
        return self.away_score - self.home_score

    def __str__(self) -> str:  # pragma: no cover - trivial
        home = self.home_team or "?"
        away = self.away_team or "?"
        return f"{home} {self.home_score}:{self.away_score} {away}"
