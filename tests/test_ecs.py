import pytest

from duds.components import Blocking, Layer, MapPosition, Player, Walkable
from duds.ecs import World


def test_spawn_and_get():
    world = World()
    entity = world.spawn(MapPosition(3, 4), Layer(1))
    assert world.get(entity, MapPosition) == MapPosition(3, 4)
    assert world.get(entity, Layer) == Layer(1)
    assert world.get(entity, Walkable) is None


def test_spawn_returns_distinct_ids():
    world = World()
    a = world.spawn()
    b = world.spawn()
    assert a != b
    assert len(world) == 2


def test_insert_replaces_same_type():
    world = World()
    entity = world.spawn(MapPosition(1, 1))
    world.insert(entity, MapPosition(2, 2))
    assert world.get(entity, MapPosition) == MapPosition(2, 2)


def test_remove_returns_component():
    world = World()
    entity = world.spawn(Player())
    assert world.remove(entity, Player) == Player()
    assert world.has(entity, Player) is False
    assert world.remove(entity, Player) is None


def test_despawn_deletes_entity():
    world = World()
    entity = world.spawn(Player())
    world.despawn(entity)
    assert entity not in world
    with pytest.raises(KeyError):
        world.get(entity, Player)
    with pytest.raises(KeyError):
        world.despawn(entity)


def test_query_filters_by_types_and_without():
    world = World()
    floor = world.spawn(MapPosition(0, 0), Walkable(1))
    wall = world.spawn(MapPosition(1, 0), Blocking())
    world.spawn(Player())
    assert [e for e, _ in world.query(MapPosition)] == [floor, wall]
    assert [e for e, _ in world.query(MapPosition, without=Blocking)] == [floor]
    assert [e for e, _, _ in world.query(MapPosition, Walkable)] == [floor]


def test_query_tolerates_despawn_during_iteration():
    world = World()
    entities = [world.spawn(Player()) for _ in range(3)]
    seen = []
    for entity, _ in world.query(Player):
        seen.append(entity)
        for other in entities:
            if other != entity and other in world:
                world.despawn(other)
    assert seen == entities[:1]


def test_single_requires_exactly_one():
    world = World()
    with pytest.raises(LookupError):
        world.single(Player)
    player = world.spawn(Player())
    assert world.single(Player) == (player, Player())
    world.spawn(Player())
    with pytest.raises(LookupError):
        world.single(Player)