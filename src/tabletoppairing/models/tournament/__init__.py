"""Tournament data models."""

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

from .match_result import MatchExtras, MatchResult
from .pairing import Pairing
from .player_standing import PlayerStanding
from .round_data import RoundData, round_status_for
from .scoring_rules import ScoringRules
from .tournament import Tournament, create_tournament
from .tournament_player import TournamentPlayer

__all__ = [
    "MatchExtras",
    "MatchResult",
    "Pairing",
    "PlayerStanding",
    "RoundData",
    "ScoringRules",
    "Tournament",
    "TournamentPlayer",
    "create_tournament",
    "round_status_for",
]
