"""PlayerStanding data class."""

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
from typing import Any, Dict, List, Tuple


@dataclass
class PlayerStanding:
    """Computed totals for one player.

    Built fresh by the standings calculator on every query and never
    stored; the round history is the only source of truth.

    Attributes
    ----------
    player_id : str
        Player reference.
    tournament_points, secondary_points : int
        Summed TP and SP.
    vp_scored, vp_allowed, vp_diff : int
        Victory point totals.
    wins, draws, losses : int
        Outcome tally; a bye counts as a win.
    points_destroyed : int
        Summed points-destroyed extras.
    schedule_strength : float
        Mean current TP of every opponent faced.
    rank : int
        1-based position in the standings.
    opponents : list of str
        Opponent ids, one entry per game played.
    """

    player_id: str
    tournament_points: int = 0
    secondary_points: int = 0
    vp_scored: int = 0
    vp_allowed: int = 0
    vp_diff: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points_destroyed: int = 0
    schedule_strength: float = 0.0
    rank: int = 0
    opponents: List[str] = field(default_factory=list)

    @property
    def sort_key(self) -> Tuple[float, ...]:
        """Ranking tuple, compared in descending order."""
        return (
            self.tournament_points,
            self.secondary_points,
            self.points_destroyed,
            self.schedule_strength,
        )

    @property
    def games_played(self) -> int:
        return self.wins + self.draws + self.losses

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "rank": self.rank,
            "tournament_points": self.tournament_points,
            "secondary_points": self.secondary_points,
            "vp_scored": self.vp_scored,
            "vp_allowed": self.vp_allowed,
            "vp_diff": self.vp_diff,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "points_destroyed": self.points_destroyed,
            "schedule_strength": self.schedule_strength,
            "opponents": list(self.opponents),
        }
