"""Pairing data class."""

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
from typing import Any, Dict, Optional, Tuple

from .match_result import MatchResult


@dataclass(frozen=True)
class Pairing:
    """One table in a round.

    Attributes
    ----------
    id : str
        Unique pairing identifier.
    player1_id : str
        First player (the bye recipient for a bye).
    player2_id : str or None
        Second player, None encodes a bye.
    result : MatchResult or None
        Recorded outcome, None until reported.
    """

    id: str
    player1_id: str
    player2_id: Optional[str] = None
    result: Optional[MatchResult] = None

    @property
    def is_bye(self) -> bool:
        return self.player2_id is None

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def player_ids(self) -> Tuple[str, ...]:
        """IDs of every player seated at this table."""
        if self.player2_id is None:
            return (self.player1_id,)
        return (self.player1_id, self.player2_id)

    def involves(self, player_id: str) -> bool:
        return player_id in self.player_ids

    def opponent_of(self, player_id: str) -> Optional[str]:
        """The other player at the table, None for a bye or a stranger."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "result": self.result.to_dict() if self.result else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        result = data.get("result")
        return cls(
            id=data["id"],
            player1_id=data["player1_id"],
            player2_id=data.get("player2_id"),
            result=MatchResult.from_dict(result) if result else None,
        )
