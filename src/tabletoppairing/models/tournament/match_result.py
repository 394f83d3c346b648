"""Match result data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from tabletoppairing.constants import OUTCOME_NORMAL

_EXTRA_FIELDS = (
    "notes",
    "game_mode",
    "player1_points_destroyed",
    "player2_points_destroyed",
    "player1_list_id",
    "player2_list_id",
)


@dataclass(frozen=True)
class MatchExtras:
    """Optional information reported alongside a result.

    None of these fields influence scoring except the points destroyed
    tallies, which feed the standings tiebreak.
    """

    notes: Optional[str] = None
    game_mode: Optional[str] = None
    player1_points_destroyed: Optional[int] = None
    player2_points_destroyed: Optional[int] = None
    player1_list_id: Optional[str] = None
    player2_list_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the extras that are set."""
        return {
            name: getattr(self, name)
            for name in _EXTRA_FIELDS
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchExtras":
        """Deserialize extras, ignoring unknown keys."""
        return cls(**{name: data.get(name) for name in _EXTRA_FIELDS})


@dataclass(frozen=True)
class MatchResult:
    """Represents the recorded outcome of a single pairing.

    Tournament and secondary points are derived from the scoring rules and
    the victory margin when the result is recorded; they are stored here so
    standings never need the rules again.

    Attributes
    ----------
    winner_id : str or None
        ID of the winning player, None for a draw.
    player1_vp, player2_vp : int
        Victory points scored by each side.
    player1_tp, player2_tp : int
        Derived tournament points.
    player1_sp, player2_sp : int
        Derived secondary points.
    outcome : str
        "normal", "forfeit" or "bye".
    extras : MatchExtras
        Free-form and tiebreak extras.
    """

    winner_id: Optional[str]
    player1_vp: int
    player2_vp: int
    player1_tp: int
    player2_tp: int
    player1_sp: int
    player2_sp: int
    outcome: str = OUTCOME_NORMAL
    extras: MatchExtras = field(default_factory=MatchExtras)

    @property
    def is_draw(self) -> bool:
        """A result without a winner is a draw."""
        return self.winner_id is None

    @property
    def player1_points_destroyed(self) -> int:
        return self.extras.player1_points_destroyed or 0

    @property
    def player2_points_destroyed(self) -> int:
        return self.extras.player2_points_destroyed or 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        data = {
            "winner_id": self.winner_id,
            "player1_vp": self.player1_vp,
            "player2_vp": self.player2_vp,
            "player1_tp": self.player1_tp,
            "player2_tp": self.player2_tp,
            "player1_sp": self.player1_sp,
            "player2_sp": self.player2_sp,
            "outcome": self.outcome,
        }
        data.update(self.extras.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            winner_id=data.get("winner_id"),
            player1_vp=data.get("player1_vp", 0),
            player2_vp=data.get("player2_vp", 0),
            player1_tp=data.get("player1_tp", 0),
            player2_tp=data.get("player2_tp", 0),
            player1_sp=data.get("player1_sp", 0),
            player2_sp=data.get("player2_sp", 0),
            outcome=data.get("outcome", OUTCOME_NORMAL),
            extras=MatchExtras.from_dict(data),
        )
