import pytest

from tabletoppairing.controllers.tournament import (
    build_match_result,
    calculate_sp,
    calculate_tp,
    margin_tier,
)
from tabletoppairing.exceptions import InvalidResultException
from tabletoppairing.models.tournament import MatchExtras, Pairing, ScoringRules


def test_default_scoring_rules():
    scoring = ScoringRules()
    assert (scoring.win_tp, scoring.draw_tp, scoring.loss_tp) == (3, 2, 1)
    assert scoring.forfeit_tp == 0
    assert (scoring.bye_tp, scoring.bye_sp) == (3, 4)


def test_calculate_tp_uses_scoring_rules():
    scoring = ScoringRules()
    assert calculate_tp(scoring, True, False) == scoring.win_tp
    assert calculate_tp(scoring, False, True) == scoring.draw_tp
    assert calculate_tp(scoring, False, False) == scoring.loss_tp


def test_calculate_tp_custom_rules():
    scoring = ScoringRules(win_tp=5, draw_tp=3, loss_tp=0)
    assert calculate_tp(scoring, True, False) == 5
    assert calculate_tp(scoring, False, True) == 3
    assert calculate_tp(scoring, False, False) == 0


@pytest.mark.parametrize(
    "vp_winner, vp_loser, expected",
    [
        (10, 4, (4, 0)),  # diff 6
        (8, 3, (4, 0)),  # diff 5
        (7, 3, (3, 1)),  # diff 4
        (6, 3, (3, 1)),  # diff 3
        (5, 3, (2, 2)),  # diff 2
        (3, 3, (2, 2)),  # diff 0, decided on something other than VP
    ],
)
def test_calculate_sp_tiers(vp_winner, vp_loser, expected):
    winner_sp = calculate_sp(True, False, vp_winner, vp_loser)
    loser_sp = calculate_sp(False, False, vp_loser, vp_winner)
    assert (winner_sp, loser_sp) == expected


def test_calculate_sp_draw_is_zero():
    assert calculate_sp(False, True, 7, 7) == 0
    assert calculate_sp(False, True, 12, 2) == 0


def test_margin_tier_names():
    assert margin_tier(15, 2) == "Crushing"
    assert margin_tier(5, 9) == "Standard"
    assert margin_tier(9, 8) == "Narrow"
    assert margin_tier(9, 8, is_draw=True) == "Draw"


def test_build_match_result_win():
    pairing = Pairing(id="t1", player1_id="A", player2_id="B")
    result = build_match_result(pairing, ScoringRules(), "B", 2, 9)
    assert result.winner_id == "B"
    assert (result.player1_tp, result.player2_tp) == (1, 3)
    assert (result.player1_sp, result.player2_sp) == (0, 4)
    assert result.outcome == "normal"


def test_build_match_result_draw():
    pairing = Pairing(id="t1", player1_id="A", player2_id="B")
    result = build_match_result(pairing, ScoringRules(), None, 6, 6)
    assert result.is_draw
    assert (result.player1_tp, result.player2_tp) == (2, 2)
    assert (result.player1_sp, result.player2_sp) == (0, 0)


def test_build_match_result_keeps_extras():
    pairing = Pairing(id="t1", player1_id="A", player2_id="B")
    extras = MatchExtras(game_mode="Custom", player1_points_destroyed=17)
    result = build_match_result(pairing, ScoringRules(), "A", 9, 1, extras)
    assert result.extras.game_mode == "Custom"
    assert result.player1_points_destroyed == 17
    assert result.player2_points_destroyed == 0


def test_build_match_result_rejects_stranger_winner():
    pairing = Pairing(id="t1", player1_id="A", player2_id="B")
    with pytest.raises(InvalidResultException):
        build_match_result(pairing, ScoringRules(), "Z", 9, 1)


def test_build_match_result_rejects_negative_vp():
    pairing = Pairing(id="t1", player1_id="A", player2_id="B")
    with pytest.raises(InvalidResultException):
        build_match_result(pairing, ScoringRules(), "A", 9, -1)
