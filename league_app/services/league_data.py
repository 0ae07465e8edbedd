# file: league_app/services/league_data.py
"""Data access for standings: snapshot loading behind an injectable source.

The standings page never talks to the ORM directly. It receives a
:class:`LeagueDataSource`, which returns complete snapshots of teams, groups
and results as plain records. The concrete source is configured once through
``settings.LEAGUE_DATA_SOURCE`` and resolved by :func:`get_data_source`.

Team references are normalised here. A result may point at its teams directly
or only through its game; a document payload may carry an identifier, a
reference mapping or a ``teams/<id>`` path. The aggregator only ever sees a
plain identifier string (or ``None`` when nothing resolves).

Provided utilities:
    - :func:`normalize_team_ref` – reduce any reference shape to an id.
    - :class:`OrmLeagueDataSource` – Django ORM backed source.
    - :class:`InMemoryLeagueDataSource` – fixed snapshot source.
    - :func:`load_snapshot` – fetch all three collections as one gathered call.
    - :func:`compute_standings` – synchronous entry point used by views and
      management commands.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from asgiref.sync import async_to_sync, sync_to_async
from django.conf import settings
from django.utils.module_loading import import_string

from league_app.exceptions import StandingsUnavailable
from league_app.services.standings import (
    GroupRecord,
    ResultRecord,
    StandingsReport,
    TeamRecord,
    build_overall_table,
    build_report,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_SOURCE = "league_app.services.league_data.OrmLeagueDataSource"

__all__ = [
    "LeagueDataSource",
    "LeagueSnapshot",
    "OrmLeagueDataSource",
    "InMemoryLeagueDataSource",
    "normalize_team_ref",
    "get_data_source",
    "load_snapshot",
    "compute_standings",
]


# --- Reference normalisation -----------------------------------------------


def normalize_team_ref(ref: Any) -> Optional[str]:
    """Return the team identifier behind ``ref`` or ``None``.

    Accepted shapes:
        * ``None`` or an empty string → ``None``.
        * ``int``/``str`` identifiers; a ``"teams/<id>"`` path keeps the last
          segment.
        * Objects exposing ``pk`` (model instances).
        * Mappings with an ``"id"`` key (serialised references).
    """
    if ref is None:
        return None
    if isinstance(ref, bool):
        return None
    if isinstance(ref, int):
        return str(ref)
    if isinstance(ref, str):
        value = ref.strip().rstrip("/")
        if "/" in value:
            value = value.rsplit("/", 1)[-1]
        return value or None
    if isinstance(ref, Mapping):
        return normalize_team_ref(ref.get("id"))
    pk = getattr(ref, "pk", None)
    if pk is not None:
        return str(pk)
    return None


# --- Source protocol -------------------------------------------------------


@runtime_checkable
class LeagueDataSource(Protocol):
    """Read side of the league store used by the standings computation."""

    async def fetch_teams(self) -> list[TeamRecord]: ...

    async def fetch_groups(self) -> list[GroupRecord]: ...

    async def fetch_results(self) -> list[ResultRecord]: ...


@dataclass(frozen=True)
class LeagueSnapshot:
    teams: list[TeamRecord] = field(default_factory=list)
    groups: list[GroupRecord] = field(default_factory=list)
    results: list[ResultRecord] = field(default_factory=list)


# --- ORM source ------------------------------------------------------------


class OrmLeagueDataSource:
    """Snapshot source reading the league tables through the Django ORM.

    Queries run via ``sync_to_async(thread_sensitive=True)`` so they share the
    caller's database connection. They are therefore serialised, not parallel.
    """

    def _teams(self) -> list[TeamRecord]:
        from league_app.models import Team

        return [
            TeamRecord(id=str(pk), name=name, logo_url=logo or None)
            for pk, name, logo in Team.objects.order_by("id").values_list("id", "name", "logo_url")
        ]

    def _groups(self) -> list[GroupRecord]:
        from league_app.models import Group

        members: dict[int, list[str]] = {}
        through = Group.teams.through.objects.order_by("id").values_list("group_id", "team_id")
        for group_id, team_id in through:
            members.setdefault(group_id, []).append(str(team_id))

        return [
            GroupRecord(
                id=str(pk),
                name=name,
                description=description or None,
                team_ids=tuple(members.get(pk, ())),
            )
            for pk, name, description in Group.objects.order_by("id").values_list("id", "name", "description")
        ]

    def _results(self) -> list[ResultRecord]:
        from league_app.models import Result

        rows = Result.objects.order_by("id").values(
            "id",
            "home_team_id",
            "away_team_id",
            "game__home_team_id",
            "game__away_team_id",
            "home_score",
            "away_score",
            "home_points",
            "away_points",
        )
        return [
            ResultRecord(
                id=str(row["id"]),
                home_team_id=normalize_team_ref(row["home_team_id"] or row["game__home_team_id"]),
                away_team_id=normalize_team_ref(row["away_team_id"] or row["game__away_team_id"]),
                home_score=int(row["home_score"] or 0),
                away_score=int(row["away_score"] or 0),
                home_points=row["home_points"],
                away_points=row["away_points"],
            )
            for row in rows
        ]

    async def fetch_teams(self) -> list[TeamRecord]:
        return await sync_to_async(self._teams, thread_sensitive=True)()

    async def fetch_groups(self) -> list[GroupRecord]:
        return await sync_to_async(self._groups, thread_sensitive=True)()

    async def fetch_results(self) -> list[ResultRecord]:
        return await sync_to_async(self._results, thread_sensitive=True)()


# --- In-memory source ------------------------------------------------------


class InMemoryLeagueDataSource:
    """Source serving a fixed snapshot (tests, offline fixtures)."""

    def __init__(
        self,
        teams: list[TeamRecord] | None = None,
        groups: list[GroupRecord] | None = None,
        results: list[ResultRecord] | None = None,
    ) -> None:
        self.teams = list(teams or [])
        self.groups = list(groups or [])
        self.results = list(results or [])

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InMemoryLeagueDataSource":
        """Build a source from document-style data.

        The payload mirrors the stored documents: ``teams`` (``id``, ``name``,
        ``logoUrl``), ``groups`` (``id``, ``name``, ``description``,
        ``teamIds``) and ``results`` carrying either ``homeTeamId`` or a
        ``homeTeamRef`` (same for the away side), scores and optional points.
        """
        teams = [
            TeamRecord(id=str(t["id"]), name=str(t.get("name") or t["id"]), logo_url=t.get("logoUrl"))
            for t in payload.get("teams", [])
        ]
        groups = [
            GroupRecord(
                id=str(g["id"]),
                name=str(g.get("name") or g["id"]),
                description=g.get("description"),
                team_ids=tuple(str(tid) for tid in g.get("teamIds") or ()),
            )
            for g in payload.get("groups", [])
        ]
        results = []
        for idx, r in enumerate(payload.get("results", [])):
            results.append(
                ResultRecord(
                    id=str(r.get("id", idx)),
                    home_team_id=normalize_team_ref(r.get("homeTeamId") or r.get("homeTeamRef")),
                    away_team_id=normalize_team_ref(r.get("awayTeamId") or r.get("awayTeamRef")),
                    home_score=int(r.get("homeScore") or 0),
                    away_score=int(r.get("awayScore") or 0),
                    home_points=r.get("homePoints"),
                    away_points=r.get("awayPoints"),
                )
            )
        return cls(teams, groups, results)

    async def fetch_teams(self) -> list[TeamRecord]:
        return list(self.teams)

    async def fetch_groups(self) -> list[GroupRecord]:
        return list(self.groups)

    async def fetch_results(self) -> list[ResultRecord]:
        return list(self.results)


# --- Wiring & entry points -------------------------------------------------


def get_data_source() -> LeagueDataSource:
    """Instantiate the source configured in ``settings.LEAGUE_DATA_SOURCE``."""
    path = getattr(settings, "LEAGUE_DATA_SOURCE", None) or DEFAULT_DATA_SOURCE
    return import_string(path)()


async def load_snapshot(source: LeagueDataSource) -> LeagueSnapshot:
    """Fetch teams, groups and results with one ``asyncio.gather``.

    The ORM source runs each query through ``sync_to_async(thread_sensitive=True)``,
    so the three queries execute one after another on the same thread and
    connection. The gather only overlaps I/O for sources whose fetches are
    truly asynchronous.

    Raises:
        StandingsUnavailable: If any of the three fetches fails. The original
        error is chained.
    """
    try:
        teams, groups, results = await asyncio.gather(
            source.fetch_teams(),
            source.fetch_groups(),
            source.fetch_results(),
        )
    except Exception as exc:
        logger.exception("Loading league snapshot from %s failed", type(source).__name__)
        raise StandingsUnavailable() from exc
    return LeagueSnapshot(teams=list(teams), groups=list(groups), results=list(results))


def compute_standings(
    source: LeagueDataSource | None = None,
    include_overall: bool = False,
) -> StandingsReport:
    """Load a snapshot and aggregate it into group tables.

    Args:
        source: Data source to read from; defaults to :func:`get_data_source`.
        include_overall: Also build the league-wide table into
            ``report.overall``.

    Returns:
        StandingsReport: Ranked tables (possibly none) and the skip count.

    Raises:
        StandingsUnavailable: When the snapshot cannot be loaded.
    """
    source = source if source is not None else get_data_source()
    snapshot = async_to_sync(load_snapshot)(source)
    report = build_report(snapshot.teams, snapshot.groups, snapshot.results)
    if include_overall:
        report.overall = build_overall_table(snapshot.teams, snapshot.results)
    logger.debug(
        "Computed %d standings tables (%d results skipped)",
        len(report.tables),
        report.skipped_results,
    )
    return report
