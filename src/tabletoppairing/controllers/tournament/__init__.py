"""Tournament operations.

Every operation takes a :class:`~tabletoppairing.models.tournament.Tournament`
value and returns a new one (or a computed view); none perform I/O or
mutate their arguments.
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

from tabletoppairing.controllers.tournament.registration import (
    accept_player,
    add_player,
    add_player_list,
    drop_player,
    get_player,
    reject_player,
    remove_player,
    remove_player_list,
    set_lists_locked,
    set_lists_visible,
    set_player_faction,
    undrop_player,
)
from tabletoppairing.controllers.tournament.result_recorder import (
    build_match_result,
    clear_match_result,
    record_forfeit,
    record_match_result,
)
from tabletoppairing.controllers.tournament.round_manager import (
    can_generate_next_round,
    complete_tournament,
    generate_pairings_for_round,
    get_current_round,
    get_round,
    get_next_round_number,
    start_tournament,
)
from tabletoppairing.controllers.tournament.standings_calculator import (
    StandingsCalculator,
    calculate_sp,
    calculate_standings,
    calculate_tp,
    margin_tier,
)

__all__ = [
    "StandingsCalculator",
    "accept_player",
    "add_player",
    "add_player_list",
    "build_match_result",
    "calculate_sp",
    "calculate_standings",
    "calculate_tp",
    "can_generate_next_round",
    "clear_match_result",
    "complete_tournament",
    "drop_player",
    "generate_pairings_for_round",
    "get_current_round",
    "get_next_round_number",
    "get_player",
    "get_round",
    "margin_tier",
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
