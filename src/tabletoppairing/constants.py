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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Tournament lifecycle
TOURNAMENT_DRAFT = "draft"
TOURNAMENT_ACTIVE = "active"
TOURNAMENT_COMPLETED = "completed"
# Status may only move forward through this sequence
TOURNAMENT_STATUS_ORDER = (TOURNAMENT_DRAFT, TOURNAMENT_ACTIVE, TOURNAMENT_COMPLETED)

# Round status
ROUND_IN_PROGRESS = "in_progress"
ROUND_COMPLETED = "completed"

# Registration status
PLAYER_PENDING = "pending"
PLAYER_ACCEPTED = "accepted"
PLAYER_REJECTED = "rejected"

# Default tournament point values (configurable per tournament)
DEFAULT_WIN_TP = 3
DEFAULT_DRAW_TP = 2
DEFAULT_LOSS_TP = 1
DEFAULT_FORFEIT_TP = 0
DEFAULT_BYE_TP = 3
DEFAULT_BYE_SP = 4

DEFAULT_REQUIRED_LISTS = 1

# Victory margin tiers, by absolute VP difference
CRUSHING_MARGIN = 5  # diff >= 5
STANDARD_MARGIN = 3  # 3 <= diff <= 4, anything lower is narrow

MARGIN_CRUSHING = "Crushing"
MARGIN_STANDARD = "Standard"
MARGIN_NARROW = "Narrow"
MARGIN_DRAW = "Draw"

# (winner SP, loser SP) per tier
SECONDARY_POINTS = {
    MARGIN_CRUSHING: (4, 0),
    MARGIN_STANDARD: (3, 1),
    MARGIN_NARROW: (2, 2),
    MARGIN_DRAW: (0, 0),
}

# Outcome type categories
OUTCOME_NORMAL = "normal"  # Game played to completion
OUTCOME_FORFEIT = "forfeit"  # One side did not play
OUTCOME_BYE = "bye"  # Pairing-allocated bye

# Scenarios available for a game
GAME_MODES = [
    "A Game of Thrones",
    "A Clash of Kings",
    "A Storm of Swords",
    "A Feast for Crows",
    "A Dance with Dragons",
    "Custom",
]
