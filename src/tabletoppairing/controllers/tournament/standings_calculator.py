"""Standings and scoring calculation for tournaments.

This module derives tournament points and secondary points for a single
match and aggregates every recorded result into ranked standings.
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

from typing import Dict, List, Optional, Tuple

from tabletoppairing.constants import (
    CRUSHING_MARGIN,
    MARGIN_CRUSHING,
    MARGIN_DRAW,
    MARGIN_NARROW,
    MARGIN_STANDARD,
    SECONDARY_POINTS,
    STANDARD_MARGIN,
)
from tabletoppairing.models.tournament import (
    Pairing,
    PlayerStanding,
    ScoringRules,
    Tournament,
)
from tabletoppairing.utils import setup_logger

logger = setup_logger(__name__)


def calculate_tp(scoring: ScoringRules, is_winner: bool, is_draw: bool) -> int:
    """Tournament points for one side of a played game."""
    if is_draw:
        return scoring.draw_tp
    if is_winner:
        return scoring.win_tp
    return scoring.loss_tp


def margin_tier(vp_for: int, vp_against: int, is_draw: bool = False) -> str:
    """Classify a game by its victory margin.

    Returns:
        One of "Crushing", "Standard", "Narrow" or "Draw"
    """
    if is_draw:
        return MARGIN_DRAW
    diff = abs(vp_for - vp_against)
    if diff >= CRUSHING_MARGIN:
        return MARGIN_CRUSHING
    if diff >= STANDARD_MARGIN:
        return MARGIN_STANDARD
    return MARGIN_NARROW


def calculate_sp(is_winner: bool, is_draw: bool, vp_for: int, vp_against: int) -> int:
    """Secondary points for one side, from the victory margin tiers.

    ========  =========  ==========
    Tier      Winner SP  Loser SP
    ========  =========  ==========
    Draw      0          0
    Crushing  4          0
    Standard  3          1
    Narrow    2          2
    ========  =========  ==========
    """
    winner_sp, loser_sp = SECONDARY_POINTS[margin_tier(vp_for, vp_against, is_draw)]
    return winner_sp if is_winner else loser_sp


class StandingsCalculator:
    """Aggregates recorded results into ranked standings.

    Standings are recomputed from the full round history on every call and
    hold no state between calls. Ranking uses, in descending order:

    - Tournament points
    - Secondary points
    - Points destroyed
    - Schedule strength (mean current TP of opponents faced)

    Ties on all four keys keep registration order and still receive
    distinct, sequential ranks.
    """

    def calculate(self, tournament: Tournament) -> List[PlayerStanding]:
        """Calculate ranked standings for every accepted player.

        Args:
            tournament: Tournament to rank

        Returns:
            Standings sorted best first, with ``rank`` set 1..K
        """
        standings = self._seed(tournament)

        for round_data in tournament.rounds:
            for pairing in round_data.pairings:
                if pairing.result is not None:
                    self._accumulate(standings, pairing)

        for standing in standings.values():
            standing.vp_diff = standing.vp_scored - standing.vp_allowed
            standing.schedule_strength = self._schedule_strength(standing, standings)

        ranked = sorted(standings.values(), key=lambda s: s.sort_key, reverse=True)
        for position, standing in enumerate(ranked, start=1):
            standing.rank = position

        logger.debug(
            "Calculated standings for %s players over %s rounds",
            len(ranked),
            len(tournament.rounds),
        )
        return ranked

    def _seed(self, tournament: Tournament) -> Dict[str, PlayerStanding]:
        """One empty standing per currently accepted player."""
        return {
            player.player_id: PlayerStanding(player_id=player.player_id)
            for player in tournament.players
            if player.is_accepted
        }

    def _accumulate(
        self, standings: Dict[str, PlayerStanding], pairing: Pairing
    ) -> None:
        """Add one pairing's result to both sides' totals."""
        result = pairing.result
        sides: List[Tuple[str, Optional[str], int, int, int, int, int]] = [
            (
                pairing.player1_id,
                pairing.player2_id,
                result.player1_tp,
                result.player1_sp,
                result.player1_vp,
                result.player2_vp,
                result.player1_points_destroyed,
            )
        ]
        if pairing.player2_id is not None:
            sides.append(
                (
                    pairing.player2_id,
                    pairing.player1_id,
                    result.player2_tp,
                    result.player2_sp,
                    result.player2_vp,
                    result.player1_vp,
                    result.player2_points_destroyed,
                )
            )

        for player_id, opponent_id, tp, sp, vp_for, vp_against, destroyed in sides:
            standing = standings.get(player_id)
            if standing is None:
                # Not currently accepted
                continue

            standing.tournament_points += tp
            standing.secondary_points += sp
            standing.vp_scored += vp_for
            standing.vp_allowed += vp_against
            standing.points_destroyed += destroyed

            if opponent_id is None:
                # Bye counts as a win with no opponent
                standing.wins += 1
                continue

            standing.opponents.append(opponent_id)
            if result.winner_id is None:
                standing.draws += 1
            elif result.winner_id == player_id:
                standing.wins += 1
            else:
                standing.losses += 1

    def _schedule_strength(
        self, standing: PlayerStanding, standings: Dict[str, PlayerStanding]
    ) -> float:
        """Mean of each opponent's current TP; unranked opponents count as 0."""
        if not standing.opponents:
            return 0.0
        opponent_tps = [
            standings[opp].tournament_points if opp in standings else 0
            for opp in standing.opponents
        ]
        return sum(opponent_tps) / len(opponent_tps)


def calculate_standings(tournament: Tournament) -> List[PlayerStanding]:
    """Ranked standings for ``tournament``, see :class:`StandingsCalculator`."""
    return StandingsCalculator().calculate(tournament)
