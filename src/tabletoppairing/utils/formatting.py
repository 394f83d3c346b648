"""Plain-text tables for standings and pairings.

Display names come from a lookup supplied by the caller (normally the
host's player registry); without one, player ids are shown as-is.
"""

# Tabletop Pairing
# Copyright (C) 2025  Tabletop Pairing developers
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

from typing import List, Optional, Sequence

from tabletoppairing.models.tournament import Pairing, PlayerStanding, RoundData
from tabletoppairing.type_hints import NameLookup

STANDINGS_HEADER = (
    f"{'#':>3}  {'Player':<24} {'TP':>4} {'SP':>4} {'PD':>5} {'SoS':>6} "
    f"{'W-D-L':>7} {'VP+/-':>6}"
)


def _name(player_id: str, name_lookup: Optional[NameLookup]) -> str:
    return name_lookup(player_id) if name_lookup else player_id


def format_standings(
    standings: Sequence[PlayerStanding], name_lookup: Optional[NameLookup] = None
) -> str:
    """Render standings as a fixed-width table, one player per line."""
    lines: List[str] = [STANDINGS_HEADER, "-" * len(STANDINGS_HEADER)]
    for s in standings:
        record = f"{s.wins}-{s.draws}-{s.losses}"
        lines.append(
            f"{s.rank:>3}  {_name(s.player_id, name_lookup)[:24]:<24} "
            f"{s.tournament_points:>4} {s.secondary_points:>4} "
            f"{s.points_destroyed:>5} {s.schedule_strength:>6.2f} "
            f"{record:>7} {s.vp_diff:>+6}"
        )
    return "\n".join(lines)


def _format_result(pairing: Pairing) -> str:
    result = pairing.result
    if result is None:
        return "pending"
    if pairing.is_bye:
        return f"bye ({result.player1_tp} TP)"
    return (
        f"{result.player1_vp}-{result.player2_vp} "
        f"({result.player1_tp}/{result.player2_tp} TP)"
    )


def format_pairings(
    round_data: RoundData, name_lookup: Optional[NameLookup] = None
) -> str:
    """Render one round's tables with their results."""
    lines = [f"Round {round_data.round_number} ({round_data.status})"]
    for table, pairing in enumerate(round_data.pairings, start=1):
        player1 = _name(pairing.player1_id, name_lookup)
        player2 = (
            _name(pairing.player2_id, name_lookup)
            if pairing.player2_id is not None
            else "BYE"
        )
        lines.append(
            f"  Table {table:>2}: {player1} vs {player2}  [{_format_result(pairing)}]"
        )
    return "\n".join(lines)
