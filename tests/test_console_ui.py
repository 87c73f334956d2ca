import pytest

from console_mario.console_ui import (
    ConsoleBox,
    ConsoleEnemy,
    ConsoleFullBox,
    ConsoleMario,
    ConsoleMoney,
    ConsoleShip,
    ConsoleUIFactory,
    UIFactory,
)
from console_mario.game import Game
from console_mario.geometry import Coord


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def factory(game):
    return ConsoleUIFactory(game)


def test_ui_factory_is_abstract(game):
    with pytest.raises(TypeError):
        UIFactory(game)


def test_factory_map_size(factory):
    assert factory.game_map.height == 30
    assert factory.game_map.width == 200
    assert factory.mario is None


@pytest.mark.parametrize(
    "cls, brush",
    [
        (ConsoleBox, "-"),
        (ConsoleEnemy, "e"),
        (ConsoleMario, "@"),
        (ConsoleMoney, "$"),
        (ConsoleShip, "#"),
    ],
)
def test_brushes(cls, brush):
    assert cls((0, 0), 1, 1).brush == brush


def test_full_box_brush_changes_when_emptied(factory):
    full_box = ConsoleFullBox((0, 0), 3, 2, factory)
    assert full_box.brush == "?"
    full_box.kill()
    assert full_box.brush == "-"


def test_create_box_registers_static(factory, game):
    factory.create_box((1, 2), 4, 3)
    box = factory.boxes[0]
    assert game.static_objs == (box,)
    assert game.map_movable_objs == (box,)
    assert game.collisionable_objs == ()
    assert factory.game_map.objs == (box,)


def test_create_ship_registers_static(factory, game):
    factory.create_ship((0, 25), 40, 2)
    ship = factory.ships[0]
    assert game.static_objs == (ship,)
    assert game.map_movable_objs == (ship,)
    assert game.movable_objs == ()
    factory.game_map.refresh_map()
    assert factory.game_map.rows[25][:40] == "#" * 40


def test_create_enemy_registers_moving(factory, game):
    factory.create_enemy((20, 5), 3, 2)
    enemy = factory.enemies[0]
    assert game.movable_objs == (enemy,)
    assert game.collisionable_objs == (enemy,)
    assert game.map_movable_objs == (enemy,)
    assert game.static_objs == ()


def test_create_full_box_registers_static_and_collisionable(factory, game):
    factory.create_full_box((30, 15), 5, 3)
    full_box = factory.full_boxes[0]
    assert game.static_objs == (full_box,)
    assert game.collisionable_objs == (full_box,)
    assert game.map_movable_objs == (full_box,)
    assert game.movable_objs == ()


def test_create_money_registers_moving(factory, game):
    factory.create_money((61, 0), 3, 2)
    money = factory.moneys[0]
    assert game.movable_objs == (money,)
    assert game.collisionable_objs == (money,)
    assert game.map_movable_objs == (money,)


def test_create_mario_replaces_previous(factory, game):
    factory.create_mario((39, 10), 3, 3)
    first = factory.mario
    factory.create_mario((16, 19), 3, 3)
    second = factory.mario
    assert second is not first
    assert game.mario is second
    assert game.collisionable_objs == (second,)
    assert game.movable_objs == (second,)
    assert factory.game_map.objs == (second,)
    assert (second.x, second.y) == (16, 19)


def test_clear_data_empties_everything(factory, game):
    factory.create_mario((39, 10), 3, 3)
    factory.create_box((60, 10), 10, 3)
    factory.create_ship((20, 25), 40, 2)
    factory.create_enemy((20, 5), 3, 2)
    factory.create_full_box((30, 15), 5, 3)
    factory.create_money((61, 0), 3, 2)
    factory.clear_data()
    assert factory.mario is None
    assert game.mario is None
    assert game.static_objs == ()
    assert game.collisionable_objs == ()
    assert game.movable_objs == ()
    assert game.map_movable_objs == ()
    assert factory.game_map.objs == ()
    assert factory.boxes == factory.ships == factory.enemies == []
    assert factory.full_boxes == factory.moneys == []


def test_full_box_hit_from_below_spawns_money(factory, game):
    factory.create_full_box((30, 15), 5, 3)
    factory.create_mario((30, 17), 3, 3)
    mario = factory.mario
    mario.jump()
    full_box = factory.full_boxes[0]
    full_box.process_mario_collision(mario)
    assert not full_box.is_active
    assert len(factory.moneys) == 1
    money = factory.moneys[0]
    assert money.top_left == Coord(full_box.x, full_box.y - 3)
    assert (money.width, money.height) == (3, 2)
    assert money in game.collisionable_objs


def test_full_box_not_hit_from_below_keeps_money(factory):
    factory.create_full_box((30, 15), 5, 3)
    factory.create_mario((30, 12), 3, 3)
    full_box = factory.full_boxes[0]
    full_box.process_mario_collision(factory.mario)
    assert full_box.is_active
    assert factory.moneys == []


def test_map_shows_created_objects(factory):
    factory.create_mario((0, 0), 3, 3)
    factory.create_enemy((10, 0), 3, 2)
    factory.game_map.refresh_map()
    rows = factory.game_map.rows
    assert rows[0][:3] == "@@@"
    assert rows[0][10:13] == "eee"
    assert rows[2][:3] == "@@@"
    assert rows[2][10] == " "