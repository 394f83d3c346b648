"""Result recording for tournaments.

This module applies reported match outcomes to pairings. Tournament points
and secondary points are always derived here from the scoring rules and the
victory margin; callers only report the winner and the victory points.
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

from dataclasses import replace
from typing import Callable, Optional

from tabletoppairing.constants import (
    GAME_MODES,
    MARGIN_CRUSHING,
    OUTCOME_FORFEIT,
    OUTCOME_NORMAL,
    SECONDARY_POINTS,
)
from tabletoppairing.exceptions import (
    InvalidResultException,
    PairingNotFoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from tabletoppairing.models.tournament import (
    MatchExtras,
    MatchResult,
    Pairing,
    ScoringRules,
    Tournament,
)
from tabletoppairing.utils import setup_logger

from .standings_calculator import calculate_sp, calculate_tp

logger = setup_logger(__name__)


def build_match_result(
    pairing: Pairing,
    scoring: ScoringRules,
    winner_id: Optional[str],
    player1_vp: int,
    player2_vp: int,
    extras: Optional[MatchExtras] = None,
) -> MatchResult:
    """Derive a full result for ``pairing`` from the reported outcome.

    Args:
        pairing: The pairing being scored
        scoring: Tournament scoring rules
        winner_id: ID of the winner, None for a draw
        player1_vp: Victory points scored by player 1
        player2_vp: Victory points scored by player 2
        extras: Optional notes, game mode, points destroyed and lists

    Returns:
        MatchResult with TP and SP filled in for both sides

    Raises:
        InvalidResultException: If the winner is not seated at this table,
            a VP tally is negative or the game mode is unknown
    """
    if winner_id is not None and not pairing.involves(winner_id):
        raise InvalidResultException(
            f"Winner {winner_id} is not part of pairing {pairing.id}"
        )
    if player1_vp < 0 or player2_vp < 0:
        raise InvalidResultException(
            f"Victory points cannot be negative ({player1_vp}-{player2_vp})"
        )
    if (
        extras is not None
        and extras.game_mode is not None
        and extras.game_mode not in GAME_MODES
    ):
        raise InvalidResultException(f"Unknown game mode: {extras.game_mode}")

    is_draw = winner_id is None
    p1_wins = winner_id == pairing.player1_id
    p2_wins = winner_id is not None and winner_id == pairing.player2_id

    player1_tp = calculate_tp(scoring, p1_wins, is_draw)
    player1_sp = calculate_sp(p1_wins, is_draw, player1_vp, player2_vp)
    if pairing.player2_id is None:
        # Nobody sits on the bye side
        player2_tp = player2_sp = 0
    else:
        player2_tp = calculate_tp(scoring, p2_wins, is_draw)
        player2_sp = calculate_sp(p2_wins, is_draw, player2_vp, player1_vp)

    return MatchResult(
        winner_id=winner_id,
        player1_vp=player1_vp,
        player2_vp=player2_vp,
        player1_tp=player1_tp,
        player2_tp=player2_tp,
        player1_sp=player1_sp,
        player2_sp=player2_sp,
        outcome=OUTCOME_NORMAL,
        extras=extras if extras is not None else MatchExtras(),
    )


def _update_pairing(
    tournament: Tournament,
    round_number: int,
    pairing_id: str,
    update: Callable[[Pairing], Pairing],
) -> Tournament:
    """Replace one pairing and recompute its round's status."""
    if tournament.is_completed:
        raise TournamentStateException(
            f"Tournament {tournament.name} is completed; results are final"
        )
    round_data = tournament.get_round(round_number)
    if round_data is None:
        raise RoundNotFoundException(f"Round {round_number} does not exist")

    pairing = round_data.get_pairing(pairing_id)
    if pairing is None:
        raise PairingNotFoundException(
            f"Pairing {pairing_id} not found in round {round_number}"
        )

    updated_round = round_data.with_pairing(update(pairing))
    rounds = tuple(
        updated_round if r.round_number == round_number else r
        for r in tournament.rounds
    )
    if updated_round.is_completed and not round_data.is_completed:
        logger.info("Round %s completed", round_number)
    return tournament.touch(rounds=rounds)


def record_match_result(
    tournament: Tournament,
    round_number: int,
    pairing_id: str,
    winner_id: Optional[str],
    player1_vp: int,
    player2_vp: int,
    extras: Optional[MatchExtras] = None,
) -> Tournament:
    """Record the outcome of one pairing.

    An existing result on the pairing is overwritten. The round becomes
    ``completed`` once every one of its pairings has a result.

    Args:
        tournament: Current tournament
        round_number: Round containing the pairing
        pairing_id: Pairing to score
        winner_id: ID of the winner, None for a draw
        player1_vp: Victory points scored by player 1
        player2_vp: Victory points scored by player 2
        extras: Optional notes, game mode, points destroyed and lists

    Returns:
        New tournament with the result applied

    Raises:
        RoundNotFoundException: If the round does not exist
        PairingNotFoundException: If the pairing is not in that round
        TournamentStateException: If the tournament is completed
        InvalidResultException: If the reported outcome is malformed
    """

    def _apply(pairing: Pairing) -> Pairing:
        if pairing.has_result:
            logger.warning(
                "Overwriting existing result for pairing %s in round %s",
                pairing_id,
                round_number,
            )
        result = build_match_result(
            pairing, tournament.scoring, winner_id, player1_vp, player2_vp, extras
        )
        logger.debug(
            "Recorded %s (%s TP, %s SP) vs %s (%s TP, %s SP)",
            pairing.player1_id,
            result.player1_tp,
            result.player1_sp,
            pairing.player2_id or "bye",
            result.player2_tp,
            result.player2_sp,
        )
        return replace(pairing, result=result)

    return _update_pairing(tournament, round_number, pairing_id, _apply)


def record_forfeit(
    tournament: Tournament,
    round_number: int,
    pairing_id: str,
    forfeiting_player_id: str,
    notes: Optional[str] = None,
) -> Tournament:
    """Record that one side of a pairing forfeited.

    The player who showed up wins with the win TP and crushing-tier SP; the
    forfeiting player receives the forfeit TP and no SP. No victory points
    are recorded.

    Raises:
        RoundNotFoundException: If the round does not exist
        PairingNotFoundException: If the pairing is not in that round
        TournamentStateException: If the tournament is completed
        InvalidResultException: If the forfeiting player is not at the table
            or the pairing is a bye
    """
    scoring = tournament.scoring
    winner_sp, loser_sp = SECONDARY_POINTS[MARGIN_CRUSHING]

    def _apply(pairing: Pairing) -> Pairing:
        if pairing.is_bye:
            raise InvalidResultException("A bye cannot be forfeited")
        winner_id = pairing.opponent_of(forfeiting_player_id)
        if winner_id is None:
            raise InvalidResultException(
                f"Player {forfeiting_player_id} is not part of pairing {pairing.id}"
            )
        p1_wins = winner_id == pairing.player1_id
        result = MatchResult(
            winner_id=winner_id,
            player1_vp=0,
            player2_vp=0,
            player1_tp=scoring.win_tp if p1_wins else scoring.forfeit_tp,
            player2_tp=scoring.forfeit_tp if p1_wins else scoring.win_tp,
            player1_sp=winner_sp if p1_wins else loser_sp,
            player2_sp=loser_sp if p1_wins else winner_sp,
            outcome=OUTCOME_FORFEIT,
            extras=MatchExtras(notes=notes),
        )
        logger.info(
            "Recorded forfeit by %s in round %s", forfeiting_player_id, round_number
        )
        return replace(pairing, result=result)

    return _update_pairing(tournament, round_number, pairing_id, _apply)


def clear_match_result(
    tournament: Tournament, round_number: int, pairing_id: str
) -> Tournament:
    """Remove a recorded result so it can be entered again.

    Bye results are synthesized at pairing time and are left in place.

    Raises:
        RoundNotFoundException: If the round does not exist
        PairingNotFoundException: If the pairing is not in that round
        TournamentStateException: If the tournament is completed
    """

    def _apply(pairing: Pairing) -> Pairing:
        if pairing.is_bye:
            logger.warning("Bye results cannot be cleared (pairing %s)", pairing_id)
            return pairing
        return replace(pairing, result=None)

    return _update_pairing(tournament, round_number, pairing_id, _apply)
