"""Structural validation of generated rounds.

Checks a round's pairings against the pairing rules: every eligible player
is seated exactly once, at most one bye is handed out, nobody plays
themselves, and no rematch appears when a rematch-free round was possible.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from tabletoppairing.exceptions import RoundNotFoundException
from tabletoppairing.models.tournament import RoundData, Tournament
from tabletoppairing.pairing import (
    build_previous_opponents,
    find_pairings,
    get_eligible_players,
)
from tabletoppairing.utils import setup_logger

logger = setup_logger(__name__)


class ViolationType(Enum):
    """Kinds of pairing rule violations."""

    DUPLICATE_PLAYER = "DUPLICATE_PLAYER"
    SELF_PAIRING = "SELF_PAIRING"
    MULTIPLE_BYES = "MULTIPLE_BYES"
    MISSING_PLAYER = "MISSING_PLAYER"
    INELIGIBLE_PLAYER = "INELIGIBLE_PLAYER"
    AVOIDABLE_REMATCH = "AVOIDABLE_REMATCH"


@dataclass
class Violation:
    """A single rule violation found in a round."""

    violation_type: ViolationType
    description: str
    player_ids: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.violation_type.value,
            "description": self.description,
            "player_ids": list(self.player_ids),
        }


@dataclass
class ValidationReport:
    """Validation outcome for one round."""

    round_number: int
    checked_pairings: int
    violations: List[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def summary(self) -> str:
        if self.is_valid:
            return (
                f"Round {self.round_number}: {self.checked_pairings} pairings, "
                "no violations"
            )
        counts = Counter(v.violation_type.value for v in self.violations)
        details = ", ".join(f"{name}={count}" for name, count in sorted(counts.items()))
        return (
            f"Round {self.round_number}: {len(self.violations)} violation(s) "
            f"({details})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_number": self.round_number,
            "checked_pairings": self.checked_pairings,
            "is_valid": self.is_valid,
            "summary": self.summary,
            "violations": [v.to_dict() for v in self.violations],
        }


class PairingValidator:
    """Validates rounds of a tournament.

    Eligibility is judged against the tournament's current registration
    state, so validate a round right after it is generated.
    """

    def validate_round(
        self, tournament: Tournament, round_number: int
    ) -> ValidationReport:
        """Validate one round.

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        round_data = tournament.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundException(f"Round {round_number} does not exist")

        report = ValidationReport(
            round_number=round_number, checked_pairings=len(round_data.pairings)
        )
        self._check_seating(tournament, round_data, report)
        self._check_byes(round_data, report)
        self._check_rematches(tournament, round_data, report)

        if report.is_valid:
            logger.debug(report.summary)
        else:
            logger.warning(report.summary)
        return report

    def validate_tournament(self, tournament: Tournament) -> List[ValidationReport]:
        """Validate every round, in order."""
        return [
            self.validate_round(tournament, r.round_number) for r in tournament.rounds
        ]

    def _check_seating(
        self, tournament: Tournament, round_data: RoundData, report: ValidationReport
    ) -> None:
        for pairing in round_data.pairings:
            if pairing.player1_id == pairing.player2_id:
                report.violations.append(
                    Violation(
                        ViolationType.SELF_PAIRING,
                        f"{pairing.player1_id} is paired against themselves",
                        (pairing.player1_id,),
                    )
                )

        appearances = Counter(round_data.player_ids)
        for player_id, count in appearances.items():
            if count > 1:
                report.violations.append(
                    Violation(
                        ViolationType.DUPLICATE_PLAYER,
                        f"{player_id} is seated {count} times",
                        (player_id,),
                    )
                )

        eligible = {p.player_id for p in get_eligible_players(tournament.players)}
        for player_id in sorted(eligible - set(appearances)):
            report.violations.append(
                Violation(
                    ViolationType.MISSING_PLAYER,
                    f"Eligible player {player_id} is not paired",
                    (player_id,),
                )
            )
        for player_id in sorted(set(appearances) - eligible):
            report.violations.append(
                Violation(
                    ViolationType.INELIGIBLE_PLAYER,
                    f"{player_id} is paired but not eligible",
                    (player_id,),
                )
            )

    def _check_byes(self, round_data: RoundData, report: ValidationReport) -> None:
        byes = [p.player1_id for p in round_data.pairings if p.is_bye]
        if len(byes) > 1:
            report.violations.append(
                Violation(
                    ViolationType.MULTIPLE_BYES,
                    f"{len(byes)} byes in one round",
                    tuple(byes),
                )
            )

    def _check_rematches(
        self, tournament: Tournament, round_data: RoundData, report: ValidationReport
    ) -> None:
        earlier = [
            r for r in tournament.rounds if r.round_number < round_data.round_number
        ]
        previous = build_previous_opponents(earlier)
        rematches = [
            (p.player1_id, p.player2_id)
            for p in round_data.pairings
            if p.player2_id is not None
            and p.player2_id in previous.get(p.player1_id, set())
        ]
        if not rematches:
            return

        pool = [
            pid for p in round_data.pairings if not p.is_bye for pid in p.player_ids
        ]
        if find_pairings(pool, previous) is None:
            logger.debug("Round %s rematches were unavoidable", round_data.round_number)
            return

        for player1_id, player2_id in rematches:
            report.violations.append(
                Violation(
                    ViolationType.AVOIDABLE_REMATCH,
                    f"{player1_id} and {player2_id} meet again although a "
                    "rematch-free round was possible",
                    (player1_id, player2_id),
                )
            )


def create_pairing_validator() -> PairingValidator:
    """Factory function to create a pairing validator."""
    return PairingValidator()


def validate_round(tournament: Tournament, round_number: int) -> ValidationReport:
    """Validate one round of ``tournament``."""
    return create_pairing_validator().validate_round(tournament, round_number)
