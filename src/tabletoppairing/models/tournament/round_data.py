"""Data model for tournament round."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tabletoppairing.constants import ROUND_COMPLETED, ROUND_IN_PROGRESS

from .pairing import Pairing


def round_status_for(pairings: Iterable[Pairing]) -> str:
    """A round is completed iff every pairing in it has a result."""
    if all(pairing.has_result for pairing in pairings):
        return ROUND_COMPLETED
    return ROUND_IN_PROGRESS


@dataclass(frozen=True)
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : tuple of Pairing
        Tables for this round, the bye (if any) last.
    status : str
        "in_progress" or "completed". Always derived from the pairings when
        the round is built through :meth:`from_pairings` or
        :meth:`with_pairing`.
    """

    round_number: int
    pairings: Tuple[Pairing, ...] = ()
    status: str = ROUND_IN_PROGRESS

    @classmethod
    def from_pairings(
        cls, round_number: int, pairings: Iterable[Pairing]
    ) -> "RoundData":
        """Build a round whose status matches its pairings."""
        pairings = tuple(pairings)
        return cls(
            round_number=round_number,
            pairings=pairings,
            status=round_status_for(pairings),
        )

    @property
    def is_completed(self) -> bool:
        return self.status == ROUND_COMPLETED

    @property
    def bye_pairing(self) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.is_bye:
                return pairing
        return None

    @property
    def player_ids(self) -> List[str]:
        """Every player seated this round, in table order."""
        return [pid for pairing in self.pairings for pid in pairing.player_ids]

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.id == pairing_id:
                return pairing
        return None

    def with_pairing(self, updated: Pairing) -> "RoundData":
        """Return a copy with one pairing swapped in and the status recomputed."""
        pairings = tuple(
            updated if pairing.id == updated.id else pairing
            for pairing in self.pairings
        )
        return replace(self, pairings=pairings, status=round_status_for(pairings))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            pairings=tuple(Pairing.from_dict(p) for p in data.get("pairings", [])),
            status=data.get("status", ROUND_IN_PROGRESS),
        )
