from tabletoppairing import (
    accept_player,
    add_player,
    add_player_list,
    drop_player,
    get_player,
    reject_player,
    remove_player,
    remove_player_list,
    set_lists_locked,
    set_lists_visible,
    set_player_faction,
    undrop_player,
)


def test_add_player_registers_pending(draft_tournament):
    tournament = add_player(draft_tournament, "p1")
    player = get_player(tournament, "p1")
    assert player is not None
    assert player.status == "pending"
    assert not player.is_eligible
    assert draft_tournament.players == ()


def test_add_player_is_idempotent(draft_tournament):
    once = add_player(draft_tournament, "p1")
    twice = add_player(once, "p1")
    assert twice is once
    assert [p.player_id for p in twice.players] == ["p1"]


def test_add_player_keeps_registration_order(draft_tournament):
    tournament = draft_tournament
    for player_id in ["c", "a", "b"]:
        tournament = add_player(tournament, player_id)
    assert [p.player_id for p in tournament.players] == ["c", "a", "b"]


def test_accept_and_reject(draft_tournament):
    tournament = accept_player(add_player(draft_tournament, "p1"), "p1")
    assert get_player(tournament, "p1").is_eligible

    tournament = reject_player(tournament, "p1")
    assert get_player(tournament, "p1").status == "rejected"
    assert not get_player(tournament, "p1").is_eligible

    tournament = accept_player(tournament, "p1")
    assert get_player(tournament, "p1").status == "accepted"


def test_unknown_player_operations_are_noops(draft_tournament):
    for operation in (accept_player, reject_player, drop_player, undrop_player):
        assert operation(draft_tournament, "ghost") is draft_tournament
    assert remove_player(draft_tournament, "ghost") is draft_tournament
    assert set_player_faction(draft_tournament, "ghost", "Stark") is draft_tournament
    assert add_player_list(draft_tournament, "ghost", "l1") is draft_tournament


def test_drop_and_undrop(make_tournament):
    tournament = drop_player(make_tournament(["p1", "p2"]), "p1")
    player = get_player(tournament, "p1")
    assert player.dropped
    assert player.is_accepted
    assert not player.is_eligible

    tournament = undrop_player(tournament, "p1")
    assert get_player(tournament, "p1").is_eligible


def test_remove_player(make_tournament):
    tournament = remove_player(make_tournament(["p1", "p2"]), "p1")
    assert [p.player_id for p in tournament.players] == ["p2"]


def test_faction_and_lists(draft_tournament):
    tournament = add_player(draft_tournament, "p1")
    tournament = set_player_faction(tournament, "p1", "Lannister")
    tournament = add_player_list(tournament, "p1", "list-1")
    tournament = add_player_list(tournament, "p1", "list-2")
    assert add_player_list(tournament, "p1", "list-1") is tournament

    player = get_player(tournament, "p1")
    assert player.faction == "Lannister"
    assert player.list_ids == ("list-1", "list-2")

    tournament = remove_player_list(tournament, "p1", "list-1")
    assert get_player(tournament, "p1").list_ids == ("list-2",)
    assert remove_player_list(tournament, "p1", "missing") is tournament

    tournament = set_player_faction(tournament, "p1", None)
    assert get_player(tournament, "p1").faction is None


def test_list_flags(draft_tournament):
    assert not draft_tournament.lists_visible
    assert not draft_tournament.lists_locked

    tournament = set_lists_locked(set_lists_visible(draft_tournament, True), True)
    assert tournament.lists_visible
    assert tournament.lists_locked
    assert set_lists_visible(tournament, True) is tournament
