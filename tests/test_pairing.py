import math
import random

import pytest

from tabletoppairing.models.tournament import (
    PlayerStanding,
    RoundData,
    ScoringRules,
    TournamentPlayer,
)
from tabletoppairing.pairing import (
    build_previous_opponents,
    find_pairings,
    generate_random_pairings,
    generate_swiss_pairings,
    make_bye_pairing,
    select_bye_player,
)


def _accepted(*player_ids):
    return [TournamentPlayer(player_id=pid, status="accepted") for pid in player_ids]


def _tables(pairings):
    return [(p.player1_id, p.player2_id) for p in pairings]


@pytest.mark.parametrize("count", range(0, 10))
def test_random_pairings_seat_everyone_once(count):
    players = _accepted(*[f"p{i}" for i in range(count)])
    pairings = generate_random_pairings(players, ScoringRules(), random.Random(count))

    assert len(pairings) == math.ceil(count / 2)
    seated = [pid for p in pairings for pid in p.player_ids]
    assert sorted(seated) == sorted(p.player_id for p in players)
    byes = [p for p in pairings if p.is_bye]
    assert len(byes) == count % 2


def test_random_pairings_are_reproducible_with_seed():
    players = _accepted(*"ABCDEFGH")
    first = generate_random_pairings(players, ScoringRules(), random.Random(7))
    second = generate_random_pairings(players, ScoringRules(), random.Random(7))
    assert _tables(first) == _tables(second)


def test_random_pairings_skip_ineligible_players():
    players = [
        TournamentPlayer("A", status="accepted"),
        TournamentPlayer("B", status="pending"),
        TournamentPlayer("C", status="rejected"),
        TournamentPlayer("D", status="accepted", dropped=True),
        TournamentPlayer("E", status="accepted"),
    ]
    pairings = generate_random_pairings(players, ScoringRules(), random.Random(1))
    assert len(pairings) == 1
    assert set(pairings[0].player_ids) == {"A", "E"}


def test_bye_pairing_result():
    pairing = make_bye_pairing("A", ScoringRules())
    assert pairing.is_bye
    result = pairing.result
    assert result.winner_id == "A"
    assert (result.player1_vp, result.player2_vp) == (0, 0)
    assert (result.player1_tp, result.player1_sp) == (3, 4)
    assert (result.player2_tp, result.player2_sp) == (0, 0)
    assert result.outcome == "bye"


def test_previous_opponents_ignore_byes():
    rounds = [
        RoundData.from_pairings(1, [make_bye_pairing("E", ScoringRules())]),
        RoundData.from_pairings(2, []),
    ]
    assert build_previous_opponents(rounds) == {}


def test_find_pairings_avoids_previous_opponents():
    previous = {"A": {"B"}, "B": {"A"}}
    assert find_pairings(["A", "B", "C", "D"], previous) == [("A", "C"), ("B", "D")]


def test_find_pairings_backtracks_out_of_dead_end():
    # A-B first would leave C-D, who have already met
    previous = {"C": {"D"}, "D": {"C"}}
    assert find_pairings(["A", "B", "C", "D"], previous) == [("A", "C"), ("B", "D")]


def test_find_pairings_without_rematches_can_fail():
    previous = {"A": {"B"}, "B": {"A"}}
    assert find_pairings(["A", "B"], previous) is None
    assert find_pairings(["A", "B"], previous, allow_rematches=True) == [("A", "B")]


def test_find_pairings_prefers_fresh_opponents_when_rematches_allowed():
    previous = {"A": {"B", "C"}, "B": {"A"}, "C": {"A"}}
    # A has met B and C, so only D is fresh for A
    schedule = find_pairings(["A", "B", "C", "D"], previous, allow_rematches=True)
    assert schedule == [("A", "D"), ("B", "C")]


def test_swiss_pairs_by_standings():
    players = _accepted("A", "B", "C", "D")
    standings = [
        PlayerStanding("A", tournament_points=6),
        PlayerStanding("B", tournament_points=3),
        PlayerStanding("C", tournament_points=9),
        PlayerStanding("D", tournament_points=0),
    ]
    pairings = generate_swiss_pairings(players, [], standings, ScoringRules())
    assert _tables(pairings) == [("C", "A"), ("B", "D")]


def test_swiss_breaks_ties_with_secondary_points():
    players = _accepted("A", "B", "C", "D")
    standings = [
        PlayerStanding("A", tournament_points=3, secondary_points=1),
        PlayerStanding("B", tournament_points=3, secondary_points=4),
        PlayerStanding("C", tournament_points=1, secondary_points=2),
        PlayerStanding("D", tournament_points=1, secondary_points=0),
    ]
    pairings = generate_swiss_pairings(players, [], standings, ScoringRules())
    assert _tables(pairings) == [("B", "A"), ("C", "D")]


def test_swiss_bye_goes_to_lowest_ranked_without_bye():
    players = _accepted("A", "B", "C", "D", "E")
    standings = [
        PlayerStanding(pid, tournament_points=10 - i) for i, pid in enumerate("ABCDE")
    ]
    rounds = [RoundData.from_pairings(1, [make_bye_pairing("E", ScoringRules())])]

    pairings = generate_swiss_pairings(players, rounds, standings, ScoringRules())
    assert pairings[-1].is_bye
    assert pairings[-1].player1_id == "D"
    assert _tables(pairings[:-1]) == [("A", "B"), ("C", "E")]


def test_select_bye_falls_back_to_lowest_ranked():
    rounds = [
        RoundData.from_pairings(i, [make_bye_pairing(pid, ScoringRules())])
        for i, pid in enumerate("ABC", start=1)
    ]
    assert select_bye_player(["A", "B", "C"], rounds) == "C"
    assert select_bye_player(["A", "B"], rounds) is None


def test_swiss_players_without_standing_pair_last():
    players = _accepted("A", "B", "C", "D")
    standings = [
        PlayerStanding("C", tournament_points=3),
        PlayerStanding("A", tournament_points=1),
    ]
    pairings = generate_swiss_pairings(players, [], standings, ScoringRules())
    assert _tables(pairings) == [("C", "A"), ("B", "D")]


def test_swiss_with_no_eligible_players():
    assert generate_swiss_pairings([], [], [], ScoringRules()) == []
