"""Tabletop Pairing: tournament pairing and standings for tabletop games.

The engine works on immutable :class:`~tabletoppairing.models.tournament.Tournament`
snapshots. Every operation takes a snapshot and returns a new one; hosts
persist the result however they like.

Typical flow::

    t = create_tournament("Summer Open", "2025-07-12", 40, 3)
    t = accept_player(add_player(t, "p1"), "p1")
    ...
    t = start_tournament(t)
    t = generate_pairings_for_round(t)
    t = record_match_result(t, 1, pairing_id, "p1", 9, 4)
    standings = calculate_standings(t)
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

from tabletoppairing.controllers.tournament import (
    accept_player,
    add_player,
    add_player_list,
    calculate_sp,
    calculate_standings,
    calculate_tp,
    can_generate_next_round,
    clear_match_result,
    complete_tournament,
    drop_player,
    generate_pairings_for_round,
    get_current_round,
    get_next_round_number,
    get_player,
    get_round,
    record_forfeit,
    record_match_result,
    reject_player,
    remove_player,
    remove_player_list,
    set_lists_locked,
    set_lists_visible,
    set_player_faction,
    start_tournament,
    undrop_player,
)
from tabletoppairing.exceptions import TabletopPairingException
from tabletoppairing.models.tournament import (
    MatchExtras,
    MatchResult,
    Pairing,
    PlayerStanding,
    RoundData,
    ScoringRules,
    Tournament,
    TournamentPlayer,
    create_tournament,
)

__version__ = "0.1.0"

__all__ = [
    "MatchExtras",
    "MatchResult",
    "Pairing",
    "PlayerStanding",
    "RoundData",
    "ScoringRules",
    "TabletopPairingException",
    "Tournament",
    "TournamentPlayer",
    "accept_player",
    "add_player",
    "add_player_list",
    "calculate_sp",
    "calculate_standings",
    "calculate_tp",
    "can_generate_next_round",
    "clear_match_result",
    "complete_tournament",
    "create_tournament",
    "drop_player",
    "generate_pairings_for_round",
    "get_current_round",
    "get_next_round_number",
    "get_player",
    "get_round",
    "record_forfeit",
    "record_match_result",
    "reject_player",
    "remove_player",
    "remove_player_list",
    "set_lists_locked",
    "set_lists_visible",
    "set_player_faction",
    "start_tournament",
    "undrop_player",
]
