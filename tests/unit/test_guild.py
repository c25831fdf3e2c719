from grid_inventory.guild import Guild
from tests.test_utils import make_guild, make_player, sword


def test_find_player() -> None:
    guild = make_guild("A", "Aria", "Bram")
    assert guild.find_player("Aria") == 0
    assert guild.find_player("Bram") == 1
    assert guild.find_player("Cato") is None
    assert "Bram" in guild
    assert "Cato" not in guild
    assert 3 not in guild


def test_enlist_moves_player_in() -> None:
    guild = Guild("A")
    player = make_player("Aria", placed=[(0, 0, sword())])
    assert guild.enlist_player(player)
    assert len(guild) == 1
    member = guild.get_player("Aria")
    assert member is not None
    assert member.get_inventory_ref().get_count() == 1
    # the caller's object has been moved from
    assert player.get_name() == ""
    assert player.get_inventory_ref().get_count() == 0


def test_enlist_duplicate_name_fails() -> None:
    guild = make_guild("A", "Aria")
    duplicate = make_player("Aria", placed=[(0, 0, sword())])
    assert not guild.enlist_player(duplicate)
    assert len(guild) == 1
    assert duplicate.get_name() == "Aria"
    assert duplicate.get_inventory_ref().get_count() == 1


def test_move_player_to() -> None:
    a = make_guild("A", "Aria", "Bram")
    b = Guild("B")
    assert a.move_player_to("Aria", b)
    assert a.find_player("Aria") is None
    assert b.find_player("Aria") is not None
    assert [p.get_name() for p in a.members] == ["Bram"]
    assert not a.move_player_to("Aria", b)
    assert len(a) == 1 and len(b) == 1


def test_move_player_to_fails_when_target_has_name() -> None:
    a = make_guild("A", "Aria")
    b = make_guild("B", "Aria")
    assert not a.move_player_to("Aria", b)
    assert len(a) == 1 and len(b) == 1


def test_move_player_to_same_guild_fails() -> None:
    a = make_guild("A", "Aria")
    assert not a.move_player_to("Aria", a)
    assert len(a) == 1


def test_move_player_keeps_inventory() -> None:
    a = Guild("A")
    a.enlist_player(make_player("Aria", placed=[(2, 2, sword())]))
    b = Guild("B")
    a.move_player_to("Aria", b)
    moved = b.get_player("Aria")
    assert moved is not None
    assert moved.get_inventory_ref().at(2, 2) == sword()


def test_copy_player_to_keeps_both() -> None:
    a = Guild("A")
    a.enlist_player(make_player("Aria"))
    b = Guild("B")
    assert a.copy_player_to("Aria", b)
    original, clone = a.get_player("Aria"), b.get_player("Aria")
    assert original is not None and clone is not None
    clone.get_inventory_ref().store(0, 0, sword())
    assert original.get_inventory_ref().get_count() == 0
    assert not a.copy_player_to("Aria", b)
    assert not a.copy_player_to("Bram", Guild())


def test_members_is_read_only_view() -> None:
    guild = make_guild("A", "Aria")
    members = guild.members
    assert isinstance(members, tuple)
    assert len(members) == 1
