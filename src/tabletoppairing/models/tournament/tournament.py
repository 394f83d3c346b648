"""Tournament aggregate.

The tournament is an immutable value: every operation in
:mod:`tabletoppairing.controllers.tournament` takes a ``Tournament`` and
returns a new one, leaving the argument untouched. Rounds and player
records are stored as tuples so snapshots can be shared safely.
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

import datetime
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from tabletoppairing.constants import (
    DEFAULT_REQUIRED_LISTS,
    TOURNAMENT_ACTIVE,
    TOURNAMENT_COMPLETED,
    TOURNAMENT_DRAFT,
)
from tabletoppairing.utils import generate_id, parse_date, setup_logger, utc_now

from .round_data import RoundData
from .scoring_rules import ScoringRules
from .tournament_player import TournamentPlayer

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Tournament:
    """Snapshot of a tournament.

    Attributes
    ----------
    id : str
        Tournament identifier.
    name : str
        Display name.
    date : datetime.date or None
        Event date.
    point_limit : int
        Army point limit for lists.
    number_of_rounds : int
        Rounds to be played; ``rounds`` never grows beyond this.
    max_players : int or None
        Registration cap, enforced by the host.
    required_lists : int
        Lists each player must submit, enforced by the host.
    scoring : ScoringRules
        Point values used when results are recorded.
    status : str
        "draft", "active" or "completed"; only ever moves forward.
    players : tuple of TournamentPlayer
        Registration records in registration order.
    rounds : tuple of RoundData
        Rounds in ascending round number.
    lists_visible : bool
        Whether submitted lists are shown to other players.
    lists_locked : bool
        Whether list changes are frozen.
    created_at, updated_at : str
        ISO-8601 timestamps.
    """

    id: str
    name: str
    point_limit: int
    number_of_rounds: int
    date: Optional[datetime.date] = None
    max_players: Optional[int] = None
    required_lists: int = DEFAULT_REQUIRED_LISTS
    scoring: ScoringRules = field(default_factory=ScoringRules)
    status: str = TOURNAMENT_DRAFT
    players: Tuple[TournamentPlayer, ...] = ()
    rounds: Tuple[RoundData, ...] = ()
    lists_visible: bool = False
    lists_locked: bool = False
    created_at: str = ""
    updated_at: str = ""

    # ========== Queries ==========

    @property
    def is_draft(self) -> bool:
        return self.status == TOURNAMENT_DRAFT

    @property
    def is_active(self) -> bool:
        return self.status == TOURNAMENT_ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == TOURNAMENT_COMPLETED

    @property
    def round_numbers(self) -> List[int]:
        return [r.round_number for r in self.rounds]

    def get_player(self, player_id: str) -> Optional[TournamentPlayer]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def has_player(self, player_id: str) -> bool:
        return self.get_player(player_id) is not None

    def get_round(self, round_number: int) -> Optional[RoundData]:
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        return None

    # ========== Updates ==========

    def touch(self, **changes: Any) -> "Tournament":
        """Copy with the given fields changed and ``updated_at`` refreshed."""
        return replace(self, updated_at=utc_now(), **changes)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to a plain, JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date.isoformat() if self.date else None,
            "point_limit": self.point_limit,
            "number_of_rounds": self.number_of_rounds,
            "max_players": self.max_players,
            "required_lists": self.required_lists,
            "scoring": self.scoring.to_dict(),
            "status": self.status,
            "players": [p.to_dict() for p in self.players],
            "rounds": [r.to_dict() for r in self.rounds],
            "lists_visible": self.lists_visible,
            "lists_locked": self.lists_locked,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", "Untitled Tournament"),
            date=parse_date(data.get("date")),
            point_limit=data["point_limit"],
            number_of_rounds=data["number_of_rounds"],
            max_players=data.get("max_players"),
            required_lists=data.get("required_lists", DEFAULT_REQUIRED_LISTS),
            scoring=ScoringRules.from_dict(data.get("scoring", {})),
            status=data.get("status", TOURNAMENT_DRAFT),
            players=tuple(
                TournamentPlayer.from_dict(p) for p in data.get("players", [])
            ),
            rounds=tuple(
                sorted(
                    (RoundData.from_dict(r) for r in data.get("rounds", [])),
                    key=lambda r: r.round_number,
                )
            ),
            lists_visible=data.get("lists_visible", False),
            lists_locked=data.get("lists_locked", False),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
        )


def create_tournament(
    name: str,
    date: Union[str, datetime.date, None],
    point_limit: int,
    number_of_rounds: int,
    max_players: Optional[int] = None,
    required_lists: int = DEFAULT_REQUIRED_LISTS,
    scoring: Optional[ScoringRules] = None,
) -> Tournament:
    """Create a new draft tournament.

    Args:
        name: Tournament name
        date: Event date, as a ``date`` or ISO string
        point_limit: Army point limit
        number_of_rounds: Rounds to play
        max_players: Optional registration cap
        required_lists: Lists each player must bring
        scoring: Scoring rules, defaults to the standard values

    Returns:
        A ``draft`` tournament with no players or rounds
    """
    now = utc_now()
    tournament = Tournament(
        id=generate_id(),
        name=name,
        date=parse_date(date),
        point_limit=point_limit,
        number_of_rounds=number_of_rounds,
        max_players=max_players,
        required_lists=required_lists,
        scoring=scoring if scoring is not None else ScoringRules(),
        created_at=now,
        updated_at=now,
    )
    logger.info(
        "Created tournament %s (%s rounds, %s points)",
        name,
        number_of_rounds,
        point_limit,
    )
    return tournament
