"""Swiss System Pairing Implementation.

Round one is paired at random. Later rounds order the field by current
standing and pair it with a depth-first backtracking search that avoids
rematches whenever a rematch-free matching exists.
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
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set

from tabletoppairing.constants import OUTCOME_BYE
from tabletoppairing.exceptions import NoPairingAvailableException
from tabletoppairing.models.tournament import (
    MatchResult,
    Pairing,
    PlayerStanding,
    RoundData,
    ScoringRules,
    TournamentPlayer,
)
from tabletoppairing.type_hints import OpponentMap, RoundSchedule
from tabletoppairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def get_eligible_players(
    players: Iterable[TournamentPlayer],
) -> List[TournamentPlayer]:
    """Accepted, non-dropped players in registration order."""
    return [p for p in players if p.is_eligible]


def make_bye_pairing(player_id: str, scoring: ScoringRules) -> Pairing:
    """Create a bye pairing with its result already filled in.

    The recipient is scored as the winner of a 0-0 game worth the
    configured bye TP and SP; the absent side gets nothing.
    """
    result = MatchResult(
        winner_id=player_id,
        player1_vp=0,
        player2_vp=0,
        player1_tp=scoring.bye_tp,
        player2_tp=0,
        player1_sp=scoring.bye_sp,
        player2_sp=0,
        outcome=OUTCOME_BYE,
    )
    return Pairing(
        id=generate_id(), player1_id=player_id, player2_id=None, result=result
    )


def build_previous_opponents(rounds: Iterable[RoundData]) -> OpponentMap:
    """Map each player to the set of opponents they have already faced.

    Bye pairings contribute nothing.
    """
    previous: OpponentMap = {}
    for round_data in rounds:
        for pairing in round_data.pairings:
            if pairing.player2_id is None:
                continue
            previous.setdefault(pairing.player1_id, set()).add(pairing.player2_id)
            previous.setdefault(pairing.player2_id, set()).add(pairing.player1_id)
    return previous


def previous_bye_recipients(rounds: Iterable[RoundData]) -> Set[str]:
    """IDs of every player who has already received a bye."""
    return {
        pairing.player1_id
        for round_data in rounds
        for pairing in round_data.pairings
        if pairing.is_bye
    }


def generate_random_pairings(
    players: Sequence[TournamentPlayer],
    scoring: ScoringRules,
    rng: Optional[random.Random] = None,
) -> List[Pairing]:
    """Pair the eligible field in a uniformly random order.

    Args:
        players: All tournament players; ineligible ones are ignored
        scoring: Scoring rules for the bye result
        rng: Random source, a fresh ``random.Random`` when omitted

    Returns:
        Pairings in table order, the bye (if any) last
    """
    rng = rng if rng is not None else random.Random()
    shuffled = [p.player_id for p in get_eligible_players(players)]
    rng.shuffle(shuffled)

    bye_player_id = shuffled.pop() if len(shuffled) % 2 == 1 else None

    pairings = [
        Pairing(id=generate_id(), player1_id=shuffled[i], player2_id=shuffled[i + 1])
        for i in range(0, len(shuffled), 2)
    ]
    if bye_player_id is not None:
        pairings.append(make_bye_pairing(bye_player_id, scoring))

    logger.debug(
        "Random pairings: %s tables, bye: %s", len(pairings), bye_player_id or "None"
    )
    return pairings


def _pairing_order(
    players: Sequence[TournamentPlayer], standings: Sequence[PlayerStanding]
) -> List[str]:
    """Eligible player ids, best performer first.

    Players without a standing entry are placed last in registration order.
    """
    eligible_ids = [p.player_id for p in get_eligible_players(players)]
    eligible = set(eligible_ids)
    ranked = sorted(standings, key=lambda s: s.sort_key, reverse=True)
    order = [s.player_id for s in ranked if s.player_id in eligible]
    seen = set(order)
    order.extend(pid for pid in eligible_ids if pid not in seen)
    return order


def select_bye_player(
    order: Sequence[str], rounds: Iterable[RoundData]
) -> Optional[str]:
    """Pick the bye recipient for an odd field.

    Scans from the lowest ranked player upwards for someone without a
    previous bye, falling back to the lowest ranked player.
    """
    if len(order) % 2 == 0:
        return None
    had_bye = previous_bye_recipients(rounds)
    for player_id in reversed(order):
        if player_id not in had_bye:
            return player_id
    return order[-1]


def find_pairings(
    pool: Sequence[str],
    previous_opponents: OpponentMap,
    allow_rematches: bool = False,
) -> Optional[RoundSchedule]:
    """Backtracking search for a complete matching of ``pool``.

    The best ranked unpaired player is matched against each remaining
    candidate in pool order, recursing on the rest and backtracking on dead
    ends. With ``allow_rematches`` set, previous opponents become legal
    candidates but are still tried after fresh ones.

    Args:
        pool: Player ids in pairing order
        previous_opponents: Opponents already faced per player
        allow_rematches: Whether previous opponents may be paired again

    Returns:
        List of (player1_id, player2_id) tuples, or None if no complete
        matching exists under the constraints
    """
    # A pool that could not be matched once can never be matched; its order
    # is fixed by the overall pairing order.
    dead_ends: Set[FrozenSet[str]] = set()

    def _pair(remaining: Sequence[str]) -> Optional[RoundSchedule]:
        if not remaining:
            return []
        key = frozenset(remaining)
        if key in dead_ends:
            return None

        player, rest = remaining[0], remaining[1:]
        faced = previous_opponents.get(player, set())
        candidates = [i for i in range(len(rest)) if rest[i] not in faced]
        if allow_rematches:
            candidates += [i for i in range(len(rest)) if rest[i] in faced]

        for idx in candidates:
            tail = _pair(rest[:idx] + rest[idx + 1 :])
            if tail is not None:
                return [(player, rest[idx])] + tail

        dead_ends.add(key)
        return None

    return _pair(tuple(pool))


def generate_swiss_pairings(
    players: Sequence[TournamentPlayer],
    rounds: Sequence[RoundData],
    standings: Sequence[PlayerStanding],
    scoring: ScoringRules,
) -> List[Pairing]:
    """Create pairings for a Swiss-system round.

    Args:
        players: All tournament players; ineligible ones are ignored
        rounds: Every round played before the one being paired
        standings: Current standings, used for the pairing order
        scoring: Scoring rules for the bye result

    Returns:
        Pairings in table order (top table first), the bye (if any) last

    Raises:
        NoPairingAvailableException: If the pool cannot be matched at all,
            which only happens when it is not of even size
    """
    order = _pairing_order(players, standings)
    if not order:
        logger.info("No eligible players to pair")
        return []

    previous_opponents = build_previous_opponents(rounds)
    bye_player_id = select_bye_player(order, rounds)
    pool = [pid for pid in order if pid != bye_player_id]

    schedule = find_pairings(pool, previous_opponents)
    if schedule is None:
        logger.warning(
            "No rematch-free pairing exists for %s players, allowing rematches",
            len(pool),
        )
        schedule = find_pairings(pool, previous_opponents, allow_rematches=True)
    if schedule is None:
        raise NoPairingAvailableException(f"Cannot pair a pool of {len(pool)} players")

    pairings = [
        Pairing(id=generate_id(), player1_id=p1, player2_id=p2) for p1, p2 in schedule
    ]
    for p1, p2 in schedule:
        if p2 in previous_opponents.get(p1, set()):
            logger.info("Unavoidable rematch: %s vs %s", p1, p2)

    if bye_player_id is not None:
        pairings.append(make_bye_pairing(bye_player_id, scoring))

    logger.debug(
        "Swiss pairings: %s tables, bye: %s", len(pairings), bye_player_id or "None"
    )
    return pairings
