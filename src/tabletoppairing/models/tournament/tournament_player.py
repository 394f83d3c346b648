"""TournamentPlayer data class."""

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

from tabletoppairing.constants import PLAYER_ACCEPTED, PLAYER_PENDING


@dataclass(frozen=True)
class TournamentPlayer:
    """A player's participation record in one tournament.

    Attributes
    ----------
    player_id : str
        Opaque reference into the host's player registry.
    status : str
        "pending", "accepted" or "rejected".
    faction : str or None
        Chosen faction, if declared.
    list_ids : tuple of str
        Army list references, in the order they were added.
    dropped : bool
        Dropped players keep their history but are not paired again.
    """

    player_id: str
    status: str = PLAYER_PENDING
    faction: Optional[str] = None
    list_ids: Tuple[str, ...] = ()
    dropped: bool = False

    @property
    def is_accepted(self) -> bool:
        return self.status == PLAYER_ACCEPTED

    @property
    def is_eligible(self) -> bool:
        """Whether this player may be paired in the next round."""
        return self.is_accepted and not self.dropped

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player record to dictionary."""
        return {
            "player_id": self.player_id,
            "status": self.status,
            "faction": self.faction,
            "list_ids": list(self.list_ids),
            "dropped": self.dropped,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentPlayer":
        """Deserialize player record from dictionary."""
        return cls(
            player_id=data["player_id"],
            status=data.get("status", PLAYER_PENDING),
            faction=data.get("faction"),
            list_ids=tuple(data.get("list_ids", [])),
            dropped=data.get("dropped", False),
        )
