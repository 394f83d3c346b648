from dataclasses import replace

import pytest

from tabletoppairing import (
    Pairing,
    RoundData,
    add_player,
    generate_pairings_for_round,
    record_match_result,
)
from tabletoppairing.exceptions import RoundNotFoundException
from tabletoppairing.models.tournament import ScoringRules
from tabletoppairing.pairing import make_bye_pairing
from tabletoppairing.validation import (
    ViolationType,
    create_pairing_validator,
    validate_round,
)


def _with_round(tournament, round_number, tables):
    pairings = [
        Pairing(id=f"r{round_number}t{i}", player1_id=p1, player2_id=p2)
        for i, (p1, p2) in enumerate(tables, start=1)
    ]
    rounds = tournament.rounds + (RoundData.from_pairings(round_number, pairings),)
    return replace(tournament, rounds=rounds)


def _types(report):
    return {v.violation_type for v in report.violations}


def _of_type(report, violation_type):
    return [v for v in report.violations if v.violation_type == violation_type]


def test_generated_round_is_valid(make_tournament, rng):
    tournament = generate_pairings_for_round(
        make_tournament(["A", "B", "C", "D", "E"]), rng=rng
    )
    report = validate_round(tournament, 1)
    assert report.is_valid
    assert report.checked_pairings == 3
    assert "no violations" in report.summary


def test_duplicate_and_self_pairing(make_tournament):
    tournament = _with_round(
        make_tournament(["A", "B", "C", "D"]), 1, [("A", "A"), ("B", "C"), ("C", "D")]
    )
    report = validate_round(tournament, 1)
    assert not report.is_valid
    assert ViolationType.SELF_PAIRING in _types(report)
    duplicates = _of_type(report, ViolationType.DUPLICATE_PLAYER)
    assert {v.player_ids for v in duplicates} == {("A",), ("C",)}


def test_multiple_byes(make_tournament):
    tournament = make_tournament(["A", "B", "C", "D"])
    round_one = RoundData.from_pairings(
        1,
        [
            Pairing(id="t1", player1_id="A", player2_id="B"),
            make_bye_pairing("C", ScoringRules()),
            make_bye_pairing("D", ScoringRules()),
        ],
    )
    report = validate_round(replace(tournament, rounds=(round_one,)), 1)
    assert _types(report) == {ViolationType.MULTIPLE_BYES}


def test_missing_and_ineligible_players(make_tournament):
    tournament = add_player(make_tournament(["A", "B", "C", "D"]), "E")
    tournament = _with_round(tournament, 1, [("A", "B"), ("C", "E")])
    report = validate_round(tournament, 1)

    missing = _of_type(report, ViolationType.MISSING_PLAYER)
    ineligible = _of_type(report, ViolationType.INELIGIBLE_PLAYER)
    assert [v.player_ids for v in missing] == [("D",)]
    assert [v.player_ids for v in ineligible] == [("E",)]


def test_avoidable_rematch_is_flagged(make_tournament):
    tournament = _with_round(
        make_tournament(["A", "B", "C", "D"]), 1, [("A", "B"), ("C", "D")]
    )
    tournament = _with_round(tournament, 2, [("A", "B"), ("C", "D")])

    assert validate_round(tournament, 1).is_valid
    report = validate_round(tournament, 2)
    assert _types(report) == {ViolationType.AVOIDABLE_REMATCH}
    assert len(report.violations) == 2
    assert "AVOIDABLE_REMATCH=2" in report.summary


def test_unavoidable_rematch_is_accepted(make_tournament):
    tournament = _with_round(make_tournament(["A", "B"]), 1, [("A", "B")])
    tournament = _with_round(tournament, 2, [("B", "A")])
    assert validate_round(tournament, 2).is_valid


def test_validate_tournament_checks_every_round(scenario):
    tournament = record_match_result(scenario, 1, "t1", "A", 8, 3)
    tournament = record_match_result(tournament, 1, "t2", "C", 6, 2)
    tournament = generate_pairings_for_round(tournament)

    reports = create_pairing_validator().validate_tournament(tournament)
    assert [r.round_number for r in reports] == [1, 2]
    assert all(r.is_valid for r in reports)
    assert reports[0].to_dict()["violations"] == []


def test_validate_unknown_round(scenario):
    with pytest.raises(RoundNotFoundException):
        validate_round(scenario, 5)
