"""Player registration for tournaments.

Every operation takes a tournament and returns a new one with exactly one
player record changed. None of them raise: unknown player ids and repeated
calls leave the tournament as it was.
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

from tabletoppairing.constants import PLAYER_ACCEPTED, PLAYER_REJECTED
from tabletoppairing.models.tournament import Tournament, TournamentPlayer
from tabletoppairing.utils import setup_logger

logger = setup_logger(__name__)


def _update_player(
    tournament: Tournament,
    player_id: str,
    update: Callable[[TournamentPlayer], TournamentPlayer],
    action: str = "Updated",
) -> Tournament:
    """Apply ``update`` to one player record, if it exists."""
    if not tournament.has_player(player_id):
        logger.debug("Player %s is not registered, nothing to update", player_id)
        return tournament
    logger.info("%s player %s", action, player_id)
    players = tuple(
        update(p) if p.player_id == player_id else p for p in tournament.players
    )
    return tournament.touch(players=players)


# ========== Registration ==========


def get_player(tournament: Tournament, player_id: str) -> Optional[TournamentPlayer]:
    return tournament.get_player(player_id)


def add_player(tournament: Tournament, player_id: str) -> Tournament:
    """Register a player as ``pending``.

    Re-adding an already registered id returns the tournament unchanged.
    """
    if tournament.has_player(player_id):
        logger.debug("Player %s already registered", player_id)
        return tournament
    logger.info("Added player %s", player_id)
    return tournament.touch(
        players=tournament.players + (TournamentPlayer(player_id=player_id),)
    )


def remove_player(tournament: Tournament, player_id: str) -> Tournament:
    """Remove a player's registration record.

    Rounds already played keep their pairings and results.
    """
    if not tournament.has_player(player_id):
        return tournament
    logger.info("Removed player %s", player_id)
    return tournament.touch(
        players=tuple(p for p in tournament.players if p.player_id != player_id)
    )


def accept_player(tournament: Tournament, player_id: str) -> Tournament:
    """Set a player's status to ``accepted``, whatever it was before."""
    return _update_player(
        tournament,
        player_id,
        lambda p: replace(p, status=PLAYER_ACCEPTED),
        action="Accepted",
    )


def reject_player(tournament: Tournament, player_id: str) -> Tournament:
    """Set a player's status to ``rejected``, whatever it was before."""
    return _update_player(
        tournament,
        player_id,
        lambda p: replace(p, status=PLAYER_REJECTED),
        action="Rejected",
    )


# ========== Participation ==========


def drop_player(tournament: Tournament, player_id: str) -> Tournament:
    """Flag a player as dropped; they are no longer paired."""
    return _update_player(
        tournament, player_id, lambda p: replace(p, dropped=True), action="Dropped"
    )


def undrop_player(tournament: Tournament, player_id: str) -> Tournament:
    """Clear a player's dropped flag."""
    return _update_player(
        tournament,
        player_id,
        lambda p: replace(p, dropped=False),
        action="Reinstated",
    )


# ========== Faction and lists ==========


def set_player_faction(
    tournament: Tournament, player_id: str, faction: Optional[str]
) -> Tournament:
    """Set (or clear, with None) a player's faction choice."""
    return _update_player(tournament, player_id, lambda p: replace(p, faction=faction))


def add_player_list(tournament: Tournament, player_id: str, list_id: str) -> Tournament:
    """Attach an army list reference to a player.

    Adding a list the player already has is a no-op. The ``required_lists``
    cap is not enforced here.
    """
    player = tournament.get_player(player_id)
    if player is None or list_id in player.list_ids:
        return tournament
    return _update_player(
        tournament, player_id, lambda p: replace(p, list_ids=p.list_ids + (list_id,))
    )


def remove_player_list(
    tournament: Tournament, player_id: str, list_id: str
) -> Tournament:
    """Detach an army list reference from a player."""
    player = tournament.get_player(player_id)
    if player is None or list_id not in player.list_ids:
        return tournament
    return _update_player(
        tournament,
        player_id,
        lambda p: replace(p, list_ids=tuple(i for i in p.list_ids if i != list_id)),
    )


# ========== Tournament-wide list flags ==========


def set_lists_visible(tournament: Tournament, visible: bool) -> Tournament:
    """Show or hide submitted lists to other players."""
    if tournament.lists_visible == visible:
        return tournament
    return tournament.touch(lists_visible=visible)


def set_lists_locked(tournament: Tournament, locked: bool) -> Tournament:
    """Freeze or unfreeze list submissions."""
    if tournament.lists_locked == locked:
        return tournament
    return tournament.touch(lists_locked=locked)
