"""ScoringRules data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from tabletoppairing.constants import (
    DEFAULT_BYE_SP,
    DEFAULT_BYE_TP,
    DEFAULT_DRAW_TP,
    DEFAULT_FORFEIT_TP,
    DEFAULT_LOSS_TP,
    DEFAULT_WIN_TP,
)


@dataclass(frozen=True)
class ScoringRules:
    """Tournament point values for each kind of match outcome.

    Attributes
    ----------
    win_tp : int
        Tournament points for winning a game.
    draw_tp : int
        Tournament points awarded to both sides of a draw.
    loss_tp : int
        Tournament points for losing a game that was played.
    forfeit_tp : int
        Tournament points for the side that forfeits.
    bye_tp : int
        Tournament points for receiving a bye.
    bye_sp : int
        Secondary points for receiving a bye.
    """

    win_tp: int = DEFAULT_WIN_TP
    draw_tp: int = DEFAULT_DRAW_TP
    loss_tp: int = DEFAULT_LOSS_TP
    forfeit_tp: int = DEFAULT_FORFEIT_TP
    bye_tp: int = DEFAULT_BYE_TP
    bye_sp: int = DEFAULT_BYE_SP

    def to_dict(self) -> Dict[str, Any]:
        """Serialize scoring rules to dictionary."""
        return {
            "win_tp": self.win_tp,
            "draw_tp": self.draw_tp,
            "loss_tp": self.loss_tp,
            "forfeit_tp": self.forfeit_tp,
            "bye_tp": self.bye_tp,
            "bye_sp": self.bye_sp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringRules":
        """Deserialize scoring rules from dictionary."""
        return cls(
            win_tp=data.get("win_tp", DEFAULT_WIN_TP),
            draw_tp=data.get("draw_tp", DEFAULT_DRAW_TP),
            loss_tp=data.get("loss_tp", DEFAULT_LOSS_TP),
            forfeit_tp=data.get("forfeit_tp", DEFAULT_FORFEIT_TP),
            bye_tp=data.get("bye_tp", DEFAULT_BYE_TP),
            bye_sp=data.get("bye_sp", DEFAULT_BYE_SP),
        )
