"""Compute the group standings and print them as text tables.

By default the configured data source is used (the database). ``--fixture``
reads a JSON snapshot instead, shaped like the stored documents::

    {"teams": [{"id": "t1", "name": "Owls"}],
     "groups": [{"id": "g1", "name": "Group A", "teamIds": ["t1"]}],
     "results": [{"homeTeamRef": "teams/t1", "awayTeamId": "t2",
                  "homeScore": 2, "awayScore": 1}]}
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from league_app.exceptions import StandingsUnavailable
from league_app.services.league_data import InMemoryLeagueDataSource, LeagueDataSource, compute_standings
from league_app.services.standings import GroupTable

HEADER = f"{'#':>2}  {'Team':<24} {'P':>3} {'W':>3} {'D':>3} {'L':>3} {'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}"


def format_table(table: GroupTable) -> list[str]:
    """Return the text lines for one table (title, header and rows)."""
    lines = [table.group_name, HEADER]
    for pos, row in enumerate(table.rows, start=1):
        gd = f"+{row.goal_difference}" if row.goal_difference > 0 else str(row.goal_difference)
        lines.append(
            f"{pos:>2}  {row.team_name[:24]:<24} {row.played:>3} {row.won:>3} {row.drawn:>3} {row.lost:>3} "
            f"{row.goals_for:>4} {row.goals_against:>4} {gd:>4} {row.points:>4}"
        )
    if not table.has_matches:
        lines.append("    No matches recorded for this group yet.")
    return lines


class Command(BaseCommand):
    help = "Print the league standings per group."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:  # type: ignore[override]
        parser.add_argument("--group", type=str, help="Only print the table with this group name.")
        parser.add_argument("--fixture", type=Path, help="JSON snapshot to compute from instead of the database.")

    def _source(self, fixture: Path | None) -> LeagueDataSource | None:
        if fixture is None:
            return None
        try:
            payload = json.loads(fixture.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CommandError(f"Cannot read fixture {fixture}: {exc}") from exc
        if not isinstance(payload, dict):
            raise CommandError(f"Fixture {fixture} must contain a JSON object.")
        return InMemoryLeagueDataSource.from_payload(payload)

    def handle(self, *args: Any, **options: Any) -> None:  # type: ignore[override]
        source = self._source(options.get("fixture"))
        try:
            report = compute_standings(source)
        except StandingsUnavailable as exc:
            raise CommandError(str(exc)) from exc

        tables = report.tables
        wanted = options.get("group")
        if wanted:
            tables = [t for t in tables if t.group_name.lower() == wanted.lower()]
            if not tables:
                raise CommandError(f"No standings table named {wanted!r}.")

        if not tables:
            self.stdout.write("No groups found. Create a group and add teams to see standings.")
            return

        for idx, table in enumerate(tables):
            if idx:
                self.stdout.write("")
            for line in format_table(table):
                self.stdout.write(line)

        if report.skipped_results:
            self.stdout.write(
                self.style.WARNING(f"{report.skipped_results} result(s) skipped: unresolved team reference.")
            )
