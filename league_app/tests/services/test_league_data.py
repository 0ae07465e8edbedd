# file: league_app/tests/services/test_league_data.py
"""Tests for the standings data sources and snapshot loading.

Coverage:
* Team reference normalisation across identifier shapes.
* ``InMemoryLeagueDataSource.from_payload`` for document-style data.
* ORM snapshots (result teams resolved directly or via the game).
* Fetch failures surfacing as ``StandingsUnavailable`` with the cause chained.
* Resolving the configured source from settings.
"""

from __future__ import annotations

import types
from typing import Any

import pytest

from league_app.exceptions import StandingsUnavailable
from league_app.services.league_data import (
    InMemoryLeagueDataSource,
    LeagueDataSource,
    OrmLeagueDataSource,
    compute_standings,
    get_data_source,
    normalize_team_ref,
)
from league_app.services.standings import UNGROUPED_ID, GroupRecord, ResultRecord, TeamRecord


# --- normalize_team_ref ------------------------------------------------------


@pytest.mark.parametrize(
    "ref, expected",
    [
        (None, None),
        ("", None),
        ("  ", None),
        ("t1", "t1"),
        (7, "7"),
        ("teams/t9", "t9"),
        ("/league/teams/abc/", "abc"),
        ({"id": "t2", "path": "teams/t2"}, "t2"),
        ({"path": "teams/t2"}, None),
        (types.SimpleNamespace(pk=5), "5"),
        (True, None),
        (object(), None),
    ],
)
def test_normalize_team_ref(ref: Any, expected: str | None) -> None:
    assert normalize_team_ref(ref) == expected


# --- In-memory source ---------------------------------------------------------


PAYLOAD = {
    "teams": [
        {"id": "t1", "name": "Owls", "logoUrl": "https://cdn.example/owls.png"},
        {"id": "t2", "name": "Hawks"},
        {"id": "t3", "name": "Lions"},
    ],
    "groups": [{"id": "g1", "name": "Group A", "teamIds": ["t1", "t2"]}],
    "results": [
        {"homeTeamRef": "teams/t1", "awayTeamId": "t2", "homeScore": 2, "awayScore": 1},
        {"homeTeamId": "t2", "awayTeamRef": {"id": "t3"}, "homeScore": 0, "awayScore": 0},
        {"homeTeamId": "t1", "awayTeamId": None, "homeScore": 9, "awayScore": 0},
    ],
}


def test_from_payload_normalises_references() -> None:
    source = InMemoryLeagueDataSource.from_payload(PAYLOAD)

    assert isinstance(source, LeagueDataSource)
    assert source.teams[0] == TeamRecord(id="t1", name="Owls", logo_url="https://cdn.example/owls.png")
    assert source.groups[0].team_ids == ("t1", "t2")
    assert [(r.home_team_id, r.away_team_id) for r in source.results] == [
        ("t1", "t2"),
        ("t2", "t3"),
        ("t1", None),
    ]


def test_compute_standings_from_payload() -> None:
    report = compute_standings(InMemoryLeagueDataSource.from_payload(PAYLOAD))

    assert [t.group_name for t in report.tables] == ["Group A", "Ungrouped Matches"]
    group_a = report.tables[0]
    assert [(r.team_name, r.points) for r in group_a.rows] == [("Owls", 3), ("Hawks", 0)]
    assert group_a.rows[0].team_logo == "https://cdn.example/owls.png"
    assert report.tables[1].group_id == UNGROUPED_ID
    assert report.skipped_results == 1
    assert report.overall is None


def test_compute_standings_with_overall_table() -> None:
    report = compute_standings(InMemoryLeagueDataSource.from_payload(PAYLOAD), include_overall=True)

    assert report.overall is not None
    assert [(r.team_name, r.points) for r in report.overall.rows] == [("Owls", 3), ("Lions", 1), ("Hawks", 1)]
    assert report.skipped_results == 1


# --- Failures ------------------------------------------------------------------


class _FailingSource(InMemoryLeagueDataSource):
    async def fetch_groups(self) -> list[GroupRecord]:
        raise PermissionError("missing or insufficient permissions")


def test_any_fetch_failure_raises_standings_unavailable() -> None:
    with pytest.raises(StandingsUnavailable) as excinfo:
        compute_standings(_FailingSource([TeamRecord("t1", "Owls")]))

    assert str(excinfo.value) == "Failed to compute standings. Check permissions and try again."
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_empty_source_is_not_an_error() -> None:
    report = compute_standings(InMemoryLeagueDataSource())
    assert report.is_empty


# --- Settings wiring ----------------------------------------------------------------


def test_get_data_source_defaults_to_orm(settings: Any) -> None:
    settings.LEAGUE_DATA_SOURCE = None
    assert isinstance(get_data_source(), OrmLeagueDataSource)


def test_get_data_source_uses_configured_path(settings: Any) -> None:
    settings.LEAGUE_DATA_SOURCE = "league_app.services.league_data.InMemoryLeagueDataSource"
    assert isinstance(get_data_source(), InMemoryLeagueDataSource)


# --- ORM source ---------------------------------------------------------------------


@pytest.mark.django_db
def test_orm_source_snapshot(teams: list[Any], Group: Any, Result: Any, make_game: Any) -> None:
    a, b, c, _d = teams
    group = Group.objects.create(name="Pool 1", description="")
    group.teams.add(a, b)

    game = make_game(a, b)
    # Teams only known through the game.
    Result.objects.create(game=game, home_score=1, away_score=0)
    Result.objects.create(home_team=b, away_team=c, home_score=2, away_score=2, home_points=0, away_points=0)

    report = compute_standings(OrmLeagueDataSource())

    pool, ungrouped = report.tables
    assert pool.group_name == "Pool 1"
    assert pool.description is None
    assert [(r.team_id, r.points) for r in pool.rows] == [(str(a.pk), 3), (str(b.pk), 0)]
    assert ungrouped.is_ungrouped
    assert {r.team_id for r in ungrouped.rows} == {str(b.pk), str(c.pk)}
    # Zero points count as a loss even on a level score.
    assert all(r.points == 0 and r.lost == 1 for r in ungrouped.rows)
    assert report.skipped_results == 0


@pytest.mark.django_db
def test_orm_source_skips_results_of_deleted_teams(teams: list[Any], Result: Any) -> None:
    a, b, *_ = teams
    Result.objects.create(home_team=a, away_team=b, home_score=3, away_score=0)
    b.delete()

    report = compute_standings(OrmLeagueDataSource())
    assert report.is_empty
    assert report.skipped_results == 1


def test_snapshot_records_are_plain_strings() -> None:
    record = ResultRecord(home_team_id=normalize_team_ref(3), away_team_id=normalize_team_ref("teams/4"))
    assert (record.home_team_id, record.away_team_id) == ("3", "4")
