# file: league_app/services/standings.py
"""Group standings computed from raw teams, groups and results.

The aggregation is a pure, single pass over in-memory snapshots. Nothing is
cached or persisted; every call recomputes the tables from scratch.

Provided utilities:
    - :func:`derive_points` – standard 3/1/0 points for a score line.
    - :func:`sort_rows` – stable ordering by points, goal difference, goals for.
    - :func:`compute_group_tables` – one ranked table per group plus the
      synthetic "ungrouped" table.
    - :func:`build_report` – same tables with the number of skipped results.
    - :func:`build_overall_table` – one league-wide table over every resolved
      result, regardless of groups.

Results whose home or away side cannot be resolved to a known team are
skipped. Each skip is logged as a warning and counted, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

UNGROUPED_ID = "__ungrouped"
UNGROUPED_NAME = "Ungrouped Matches"
OVERALL_ID = "__overall"
OVERALL_NAME = "Overall Standings"

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

__all__ = [
    "TeamRecord",
    "GroupRecord",
    "ResultRecord",
    "StandingRow",
    "GroupTable",
    "StandingsReport",
    "UNGROUPED_ID",
    "UNGROUPED_NAME",
    "OVERALL_ID",
    "OVERALL_NAME",
    "derive_points",
    "sort_rows",
    "compute_group_tables",
    "build_report",
    "build_overall_table",
]


# --- Input records ---------------------------------------------------------


@dataclass(frozen=True)
class TeamRecord:
    id: str
    name: str
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class GroupRecord:
    id: str
    name: str
    description: Optional[str] = None
    team_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResultRecord:
    """A finished match with identifiers already resolved.

    ``home_team_id``/``away_team_id`` are ``None`` when the fetch boundary
    could not resolve the reference.
    """

    home_team_id: Optional[str]
    away_team_id: Optional[str]
    home_score: int = 0
    away_score: int = 0
    home_points: Optional[int] = None
    away_points: Optional[int] = None
    id: Optional[str] = None


# --- Output records --------------------------------------------------------


@dataclass
class StandingRow:
    """Aggregated record of one team inside one table."""

    team_id: str
    team_name: str
    team_logo: Optional[str] = None
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    def apply(self, scored: int, conceded: int, points: int, outcome: str) -> None:
        """Account one match from this team's point of view."""
        self.played += 1
        if outcome == "won":
            self.won += 1
        elif outcome == "drawn":
            self.drawn += 1
        else:
            self.lost += 1
        self.goals_for += scored
        self.goals_against += conceded
        self.goal_difference += scored - conceded
        self.points += points


@dataclass
class GroupTable:
    group_id: str
    group_name: str
    description: Optional[str] = None
    rows: list[StandingRow] = field(default_factory=list)

    @property
    def is_ungrouped(self) -> bool:
        return self.group_id == UNGROUPED_ID

    @property
    def is_overall(self) -> bool:
        return self.group_id == OVERALL_ID

    @property
    def has_matches(self) -> bool:
        return any(row.played for row in self.rows)


@dataclass
class StandingsReport:
    tables: list[GroupTable] = field(default_factory=list)
    skipped_results: int = 0
    overall: Optional[GroupTable] = None

    @property
    def is_empty(self) -> bool:
        return not self.tables


# --- Helpers ---------------------------------------------------------------


def derive_points(home_score: int, away_score: int) -> tuple[int, int]:
    """Return ``(home_points, away_points)`` under the 3/1/0 rule."""
    if home_score > away_score:
        return WIN_POINTS, LOSS_POINTS
    if home_score < away_score:
        return LOSS_POINTS, WIN_POINTS
    return DRAW_POINTS, DRAW_POINTS


def _outcome(points: int, scored: int, conceded: int) -> str:
    """Classify a match as won/drawn/lost.

    The points value earned decides (3/1/0). Overrides outside those values
    fall back to comparing the score so every match lands in exactly one
    bucket.
    """
    if points == WIN_POINTS:
        return "won"
    if points == DRAW_POINTS:
        return "drawn"
    if points == LOSS_POINTS:
        return "lost"
    if scored > conceded:
        return "won"
    if scored == conceded:
        return "drawn"
    return "lost"


def sort_rows(rows: Iterable[StandingRow]) -> list[StandingRow]:
    """Sort by points, goal difference and goals for, all descending.

    ``sorted`` is stable, so rows equal on all three keys keep their
    encounter order.
    """
    return sorted(rows, key=lambda r: (-r.points, -r.goal_difference, -r.goals_for))


def _is_resolved(result: ResultRecord, team_map: dict[str, TeamRecord]) -> bool:
    home_id, away_id = result.home_team_id, result.away_team_id
    return bool(home_id and away_id and home_id in team_map and away_id in team_map)


def _apply_match(
    rows: dict[str, StandingRow],
    new_row: Callable[[str], StandingRow],
    result: ResultRecord,
) -> None:
    """Account ``result`` for both sides in ``rows``, creating missing rows."""
    home_id, away_id = result.home_team_id, result.away_team_id
    home_score = result.home_score or 0
    away_score = result.away_score or 0
    derived_home, derived_away = derive_points(home_score, away_score)
    home_points = derived_home if result.home_points is None else result.home_points
    away_points = derived_away if result.away_points is None else result.away_points

    for team_id in (home_id, away_id):
        if team_id not in rows:
            rows[team_id] = new_row(team_id)
    rows[home_id].apply(home_score, away_score, home_points, _outcome(home_points, home_score, away_score))
    rows[away_id].apply(away_score, home_score, away_points, _outcome(away_points, away_score, home_score))


def _row_factory(team_map: dict[str, TeamRecord]) -> Callable[[str], StandingRow]:
    def new_row(team_id: str) -> StandingRow:
        info = team_map.get(team_id)
        return StandingRow(
            team_id=team_id,
            team_name=info.name if info else team_id,
            team_logo=info.logo_url if info else None,
        )

    return new_row


# --- Aggregation -----------------------------------------------------------


def build_report(
    teams: Iterable[TeamRecord],
    groups: Sequence[GroupRecord],
    results: Iterable[ResultRecord],
) -> StandingsReport:
    """Aggregate results into ranked group tables.

    Args:
        teams: All known teams, unique by ``id``.
        groups: Groups in declaration order; ``team_ids`` is the membership.
        results: Finished matches with resolved team identifiers.

    Returns:
        StandingsReport: Tables for every group with at least one member (in
        declaration order), followed by the ungrouped table when any match
        was played between teams sharing no group, plus the number of
        results that were skipped.
    """
    team_map: dict[str, TeamRecord] = {t.id: t for t in teams}
    new_row = _row_factory(team_map)

    # Seed one zeroed row per (group, member) and index membership.
    tables: dict[str, GroupTable] = {}
    group_rows: dict[str, dict[str, StandingRow]] = {}
    team_groups: dict[str, list[str]] = {}
    for group in groups:
        tables[group.id] = GroupTable(group.id, group.name, group.description)
        rows: dict[str, StandingRow] = {}
        for team_id in group.team_ids:
            if team_id in rows:
                continue
            rows[team_id] = new_row(team_id)
            team_groups.setdefault(team_id, []).append(group.id)
        group_rows[group.id] = rows

    ungrouped: dict[str, StandingRow] = {}
    skipped = 0

    for result in results:
        home_id, away_id = result.home_team_id, result.away_team_id
        if not _is_resolved(result, team_map):
            skipped += 1
            logger.warning(
                "Skipping result %s: unresolved team reference (home=%r, away=%r)",
                result.id or "<unsaved>",
                home_id,
                away_id,
            )
            continue

        away_groups = set(team_groups.get(away_id, ()))
        common = [gid for gid in team_groups.get(home_id, ()) if gid in away_groups]

        if common:
            targets = [group_rows[gid] for gid in common]
        else:
            targets = [ungrouped]

        for rows in targets:
            # Rows are created on demand for teams not seeded into the table.
            _apply_match(rows, new_row, result)

    out: list[GroupTable] = []
    for group in groups:
        rows = group_rows[group.id]
        if not rows:
            continue
        table = tables[group.id]
        table.rows = sort_rows(rows.values())
        out.append(table)

    if ungrouped:
        out.append(GroupTable(UNGROUPED_ID, UNGROUPED_NAME, None, sort_rows(ungrouped.values())))

    return StandingsReport(tables=out, skipped_results=skipped)


def build_overall_table(
    teams: Iterable[TeamRecord],
    results: Iterable[ResultRecord],
) -> Optional[GroupTable]:
    """Rank every team over all resolved results, ignoring group membership.

    Only teams that played appear. Unresolved results are left out silently;
    :func:`build_report` already reports them.

    Returns:
        GroupTable | None: The ``__overall`` table, or ``None`` when no
        resolved result exists.
    """
    team_map: dict[str, TeamRecord] = {t.id: t for t in teams}
    new_row = _row_factory(team_map)
    rows: dict[str, StandingRow] = {}
    for result in results:
        if _is_resolved(result, team_map):
            _apply_match(rows, new_row, result)
    if not rows:
        return None
    return GroupTable(OVERALL_ID, OVERALL_NAME, None, sort_rows(rows.values()))


def compute_group_tables(
    teams: Iterable[TeamRecord],
    groups: Sequence[GroupRecord],
    results: Iterable[ResultRecord],
) -> list[GroupTable]:
    """Return only the ranked tables of :func:`build_report`."""
    return build_report(teams, groups, results).tables
