"""
Printing utilities for league tables and schedules.
Plain-text renderings are used by the command line; the HTML page is an
ink-friendly export of the standings.
"""

# League Pairing
# Copyright (C) 2025  League Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from html import escape
from typing import List, Optional, Sequence

from PyQt6.QtCore import QDateTime

from leaguepairing.constants import STANDINGS_COLUMNS
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.standings_row import StandingsRow
from leaguepairing.type_hints import RoundGroups


def _row_values(row: StandingsRow) -> List[str]:
    return [
        str(row.position),
        row.participant.name,
        str(row.played),
        str(row.wins),
        str(row.draws),
        str(row.losses),
        str(row.goals_for),
        str(row.goals_against),
        f"{row.goal_difference:+d}" if row.goal_difference else "0",
        str(row.points),
    ]


def format_standings_table(rows: Sequence[StandingsRow]) -> str:
    """
    Render standings as a fixed-width text table.

    Args:
        rows: Standings rows, already ranked

    Returns:
        Table text with a header line, a rule and one line per row
    """
    body = [_row_values(row) for row in rows]
    widths = [len(column) for column in STANDINGS_COLUMNS]
    for values in body:
        widths = [max(w, len(v)) for w, v in zip(widths, values)]

    def render(values: Sequence[str]) -> str:
        cells = []
        for index, (value, width) in enumerate(zip(values, widths)):
            # team name left aligned, numbers right aligned
            cells.append(value.ljust(width) if index == 1 else value.rjust(width))
        return "  ".join(cells).rstrip()

    lines = [render(STANDINGS_COLUMNS), "  ".join("-" * w for w in widths)]
    lines.extend(render(values) for values in body)
    return "\n".join(lines)


def format_fixture(fixture: Fixture) -> str:
    """One schedule line: ``#id  Home  2 - 1  Away`` with an optional date."""
    line = (
        f"#{fixture.id:<3} {fixture.home.name}  "
        f"{fixture.result_display}  {fixture.away.name}"
    )
    if fixture.date is not None:
        line += f"  ({fixture.date:%Y-%m-%d})"
    return line


def format_schedule(rounds: RoundGroups, round_number: Optional[int] = None) -> str:
    """
    Render the schedule round by round.

    Args:
        rounds: Fixtures grouped by round number
        round_number: Only render this round when given

    Returns:
        Multi-line listing with a ``Round n`` heading per round
    """
    blocks = []
    for number, fixtures in rounds.items():
        if round_number is not None and number != round_number:
            continue
        lines = [f"Round {number}"]
        lines.extend(f"  {format_fixture(f)}" for f in fixtures)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def generate_standings_html(
    tournament_name: str,
    rows: Sequence[StandingsRow],
    subtitle: str = "",
) -> str:
    """
    Generate HTML for a standings printout.

    Parameters
    ----------
    tournament_name : str
        Name of the tournament
    rows : list of StandingsRow
        Ranked standings
    subtitle : str, optional
        Line under the title, e.g. "6/12 matches played"

    Returns
    -------
    str
        Complete HTML document
    """
    main_title = "Standings"
    if tournament_name:
        main_title += f" - {escape(tournament_name)}"
    header = "".join(f"<th>{column}</th>" for column in STANDINGS_COLUMNS)

    html = f"""
    <html>
    <head>
        <meta charset="utf-8">
        <style>
            body {{ font-family: Arial, sans-serif; color: #000; background: #fff; margin: 0; padding: 0; }}
            h2 {{ text-align: center; margin: 0 0 0.5em 0; font-size: 1.35em; font-weight: normal; letter-spacing: 0.03em; }}
            .subtitle {{ text-align: center; font-size: 1.05em; margin-bottom: 1.2em; }}
            table.standings {{ border-collapse: collapse; width: 100%; margin: 0 auto 1.5em auto; }}
            table.standings th, table.standings td {{ border: 1px solid #222; padding: 6px 10px; text-align: right; font-size: 11pt; white-space: nowrap; }}
            table.standings th {{ font-weight: bold; background: none; }}
            table.standings td.team {{ text-align: left; }}
            .swatch {{ display: inline-block; width: 0.8em; height: 0.8em; border-radius: 50%; margin-right: 0.4em; }}
            .footer {{ text-align: center; font-size: 9pt; margin-top: 2em; color: #888; letter-spacing: 0.04em; }}
        </style>
    </head>
    <body>
        <h2>{main_title}</h2>
        <div class="subtitle">{escape(subtitle)}</div>
        <table class="standings">
            <tr>{header}</tr>
    """

    for row in rows:
        values = _row_values(row)
        cells = []
        for index, value in enumerate(values):
            if index == 1:
                swatch = (
                    f'<span class="swatch" '
                    f'style="background:{escape(row.participant.color)}"></span>'
                )
                cells.append(f'<td class="team">{swatch}{escape(value)}</td>')
            else:
                cells.append(f"<td>{value}</td>")
        html += f"<tr>{''.join(cells)}</tr>"

    html += f"""
        </table>
        <div class="footer">
            Printed by League Pairing &middot; {QDateTime.currentDateTime().toString('yyyy-MM-dd hh:mm')}
        </div>
    </body>
    </html>
    """

    return html
