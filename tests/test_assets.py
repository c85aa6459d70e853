import pygame
import pytest

from duds.assets import (
    AssetManager,
    SheetImage,
    SpriteCache,
    attach_sprites,
    slice_tilesheet,
    slice_tilesheets_into_cache,
    sync_transform_to_map_position,
)
from duds.components import (
    Layer,
    MapPosition,
    Moving,
    SheetSprite,
    TileSheetType,
    Transform,
)
from duds.ecs import World
from duds.highlight import Material
from duds.tilemap import TILE_SIZE


def make_sheet(columns, rows):
    width, height = columns * TILE_SIZE, rows * TILE_SIZE
    data = b"".join(
        bytes((px % 256, py % 256, 0, 255)) for py in range(height) for px in range(width)
    )
    return SheetImage(width, height, data)


def pixels(image):
    return [image.data[i : i + 4] for i in range(0, len(image.data), 4)]


def test_sheet_image_rejects_wrong_data_length():
    with pytest.raises(ValueError):
        SheetImage(2, 2, b"\x00" * 15)


def test_sheet_image_rejects_negative_size():
    with pytest.raises(ValueError):
        SheetImage(-1, 2)


def test_slice_keys_are_row_then_column():
    cache = SpriteCache()
    count = slice_tilesheet(make_sheet(2, 1), TileSheetType.WORLD, cache)
    assert count == 2
    assert set(cache.sprites) == {
        (TileSheetType.WORLD, (0, 0)),
        (TileSheetType.WORLD, (0, 1)),
    }


def test_sliced_tile_holds_its_own_pixels():
    cache = SpriteCache()
    slice_tilesheet(make_sheet(2, 3), TileSheetType.MONSTERS, cache)
    tile = cache.sprites[(TileSheetType.MONSTERS, (2, 1))]
    assert (tile.width, tile.height) == (TILE_SIZE, TILE_SIZE)
    for pixel in pixels(tile):
        assert TILE_SIZE <= pixel[0] < 2 * TILE_SIZE
        assert 2 * TILE_SIZE <= pixel[1] < 3 * TILE_SIZE
    assert pixels(tile)[0] == bytes((TILE_SIZE, 2 * TILE_SIZE, 0, 255))


def test_slice_unloaded_image_adds_nothing():
    cache = SpriteCache()
    assert slice_tilesheet(SheetImage(32, 32), TileSheetType.WORLD, cache) == 0
    assert len(cache) == 0


def test_slice_all_skips_missing_sheets():
    cache = SpriteCache()
    total = slice_tilesheets_into_cache(
        {TileSheetType.WORLD: make_sheet(3, 2), TileSheetType.MONSTERS: None}, cache
    )
    assert total == 6
    assert all(sheet is TileSheetType.WORLD for sheet, _ in cache.sprites)


def test_attach_sprites_places_entity_on_its_layer():
    cache = SpriteCache()
    slice_tilesheet(make_sheet(2, 2), TileSheetType.WORLD, cache)
    world = World()
    entity = world.spawn(
        SheetSprite(TileSheetType.WORLD, 1, 0), MapPosition(3, 4), Layer(2)
    )
    assert attach_sprites(world, cache) == [entity]
    assert world.get(entity, Transform) == Transform(3.0, 4.0, 2.0)
    assert world.get(entity, Material).texture is cache.sprites[(TileSheetType.WORLD, (1, 0))]


def test_attach_sprites_skips_uncached_and_already_drawn():
    cache = SpriteCache()
    slice_tilesheet(make_sheet(1, 1), TileSheetType.WORLD, cache)
    world = World()
    missing = world.spawn(SheetSprite(TileSheetType.MONSTERS, 0, 0), MapPosition(1, 1))
    present = world.spawn(SheetSprite(TileSheetType.WORLD, 0, 0), MapPosition(2, 2))
    assert attach_sprites(world, cache) == [present]
    assert not world.has(missing, Material)
    assert attach_sprites(world, cache) == []
    assert world.get(present, Transform).z == 0.0


def test_sync_snaps_when_close():
    world = World()
    entity = world.spawn(MapPosition(10, 0), Transform(9.5, 0.2, 2.0))
    sync_transform_to_map_position(world, 0.5)
    assert world.get(entity, Transform) == Transform(10.0, 0.0, 2.0)


def test_sync_moves_toward_target_at_default_speed():
    world = World()
    entity = world.spawn(MapPosition(10, 0), Transform(0.0, 0.0, 1.0))
    sync_transform_to_map_position(world, 0.01)
    transform = world.get(entity, Transform)
    assert transform.x == pytest.approx(1.0)
    assert transform.y == 0.0
    assert transform.z == 1.0


def test_sync_moving_entity_is_slower_than_default():
    world = World()
    slow = world.spawn(MapPosition(0, 20), Transform(0.0, 0.0, 0.0), Moving(speed=3.0))
    fast = world.spawn(MapPosition(0, 20), Transform(0.0, 0.0, 0.0))
    sync_transform_to_map_position(world, 0.01)
    slow_y = world.get(slow, Transform).y
    assert 0.0 < slow_y < world.get(fast, Transform).y


def test_asset_manager_missing_files_load_as_none(tmp_path):
    images = AssetManager(tmp_path).load()
    assert images == {TileSheetType.WORLD: None, TileSheetType.MONSTERS: None}


def test_asset_manager_loads_png_round_trip(tmp_path):
    manager = AssetManager(tmp_path)
    path = manager.path(TileSheetType.WORLD)
    path.parent.mkdir(parents=True)
    surface = pygame.Surface((32, 16), pygame.SRCALPHA)
    surface.fill((10, 20, 30, 255))
    pygame.image.save(surface, str(path))

    image = manager.load()[TileSheetType.WORLD]
    assert (image.width, image.height) == (32, 16)
    assert set(pixels(image)) == {bytes((10, 20, 30, 255))}