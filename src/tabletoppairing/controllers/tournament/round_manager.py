"""Round management for tournaments.

This module handles the tournament lifecycle (draft, active, completed),
round sequencing and pairing generation for each new round.
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

import random
from dataclasses import replace
from typing import Optional

from tabletoppairing.constants import (
    TOURNAMENT_ACTIVE,
    TOURNAMENT_COMPLETED,
    TOURNAMENT_STATUS_ORDER,
)
from tabletoppairing.exceptions import TournamentStateException
from tabletoppairing.models.tournament import RoundData, Tournament
from tabletoppairing.pairing import generate_random_pairings, generate_swiss_pairings
from tabletoppairing.utils import setup_logger

from .standings_calculator import calculate_standings

logger = setup_logger(__name__)


# ========== Lifecycle ==========


def _advance_status(tournament: Tournament, target: str) -> Tournament:
    """Move the tournament status forward; backwards moves are ignored."""
    current = TOURNAMENT_STATUS_ORDER.index(tournament.status)
    wanted = TOURNAMENT_STATUS_ORDER.index(target)
    if wanted <= current:
        if wanted < current:
            logger.warning(
                "Tournament %s is %s, cannot move back to %s",
                tournament.name,
                tournament.status,
                target,
            )
        return tournament
    logger.info("Tournament %s is now %s", tournament.name, target)
    return tournament.touch(status=target)


def start_tournament(tournament: Tournament) -> Tournament:
    """Move a draft tournament to ``active``."""
    return _advance_status(tournament, TOURNAMENT_ACTIVE)


def complete_tournament(tournament: Tournament) -> Tournament:
    """Mark the tournament ``completed``."""
    return _advance_status(tournament, TOURNAMENT_COMPLETED)


# ========== Round queries ==========


def get_next_round_number(tournament: Tournament) -> int:
    """One past the highest existing round number (1 when there are none)."""
    if not tournament.rounds:
        return 1
    return max(tournament.round_numbers) + 1


def get_round(tournament: Tournament, round_number: int) -> Optional[RoundData]:
    """Look up a round by number (None if it does not exist)."""
    return tournament.get_round(round_number)


def get_current_round(tournament: Tournament) -> Optional[RoundData]:
    """The first round still in progress, else the latest round.

    Returns:
        RoundData, or None if no rounds have been created
    """
    for round_data in tournament.rounds:
        if not round_data.is_completed:
            return round_data
    if not tournament.rounds:
        return None
    return tournament.rounds[-1]


def can_generate_next_round(tournament: Tournament) -> bool:
    """Whether pairings for the next round may be generated.

    True iff the tournament is active, the next round number does not
    exceed ``number_of_rounds`` and the most recent round (if any) is
    completed.
    """
    if not tournament.is_active:
        return False
    if get_next_round_number(tournament) > tournament.number_of_rounds:
        return False
    if tournament.rounds and not tournament.rounds[-1].is_completed:
        return False
    return True


# ========== Pairing generation ==========


def generate_pairings_for_round(
    tournament: Tournament,
    round_number: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tournament:
    """Pair the next round (or re-pair the latest one).

    Round 1 is paired at random; every later round uses Swiss pairing based
    on the standings and history of the rounds before it. Re-pairing the
    latest round replaces it, results included.

    Args:
        tournament: Current tournament
        round_number: Round to pair, defaults to the next round number
        rng: Random source for round 1

    Returns:
        New tournament with the round added or replaced, or the input
        unchanged if there is nobody to pair

    Raises:
        TournamentStateException: If the round may not be generated now
    """
    next_number = get_next_round_number(tournament)
    if round_number is None:
        round_number = next_number

    existing = tournament.get_round(round_number)
    if existing is None:
        if round_number != next_number:
            raise TournamentStateException(
                f"Round {round_number} cannot be generated, next round is {next_number}"
            )
        if not can_generate_next_round(tournament):
            raise TournamentStateException(
                f"Cannot generate round {round_number} for tournament "
                f"{tournament.name} (status: {tournament.status})"
            )
    else:
        if not tournament.is_active:
            raise TournamentStateException(
                f"Cannot re-pair round {round_number} "
                f"of a {tournament.status} tournament"
            )
        if round_number != next_number - 1:
            raise TournamentStateException(
                f"Only the latest round can be re-paired, not round {round_number}"
            )

    prior_rounds = tuple(r for r in tournament.rounds if r.round_number < round_number)
    eligible_count = sum(1 for p in tournament.players if p.is_eligible)
    logger.info(
        "Creating round %s with %s eligible players", round_number, eligible_count
    )

    if round_number == 1 and not prior_rounds:
        pairings = generate_random_pairings(tournament.players, tournament.scoring, rng)
    else:
        standings = calculate_standings(replace(tournament, rounds=prior_rounds))
        pairings = generate_swiss_pairings(
            tournament.players, prior_rounds, standings, tournament.scoring
        )

    if not pairings:
        logger.warning("Round %s not created: no eligible players", round_number)
        return tournament

    new_round = RoundData.from_pairings(round_number, pairings)
    if existing is None:
        rounds = tournament.rounds + (new_round,)
    else:
        logger.info("Replacing existing round %s", round_number)
        rounds = tuple(
            new_round if r.round_number == round_number else r
            for r in tournament.rounds
        )
    return tournament.touch(rounds=rounds)
