"""Type hints used in Tabletop Pairing."""

from typing import Callable, Dict, List, Literal, Set, Tuple

# Lifecycle literals
TournamentStatus = Literal["draft", "active", "completed"]
RoundStatus = Literal["in_progress", "completed"]
PlayerStatus = Literal["pending", "accepted", "rejected"]

# Outcome type literals
OutcomeType = Literal["normal", "forfeit", "bye"]

GameMode = Literal[
    "A Game of Thrones",
    "A Clash of Kings",
    "A Storm of Swords",
    "A Feast for Crows",
    "A Dance with Dragons",
    "Custom",
]

# player id -> ids of everyone they have faced
OpponentMap = Dict[str, Set[str]]
# (player1_id, player2_id) for one table
MatchPairing = Tuple[str, str]
RoundSchedule = List[MatchPairing]
# Registry lookup supplied by the host: player id -> display name
NameLookup = Callable[[str], str]
