import random
from dataclasses import replace

import pytest

from tabletoppairing import (
    Pairing,
    RoundData,
    accept_player,
    add_player,
    create_tournament,
    start_tournament,
)


def _build(player_ids, number_of_rounds=3, start=True):
    tournament = create_tournament("Test Open", "2025-06-01", 40, number_of_rounds)
    for player_id in player_ids:
        tournament = accept_player(add_player(tournament, player_id), player_id)
    if start:
        tournament = start_tournament(tournament)
    return tournament


@pytest.fixture
def make_tournament():
    """Factory for tournaments with accepted players, active by default."""
    return _build


@pytest.fixture
def draft_tournament():
    return create_tournament("Test Open", "2025-06-01", 40, 3)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scenario():
    """Four active players with round 1 tables fixed as A-B and C-D."""
    tournament = _build(["A", "B", "C", "D"])
    round_one = RoundData.from_pairings(
        1,
        [
            Pairing(id="t1", player1_id="A", player2_id="B"),
            Pairing(id="t2", player1_id="C", player2_id="D"),
        ],
    )
    return replace(tournament, rounds=(round_one,))
