import pytest

from console_mario.console_ui import ConsoleShip, ConsoleUIFactory
from console_mario.game import Game
from console_mario.levels import FirstLevel, GameLevel, SecondLevel


@pytest.fixture
def setup():
    game = Game()
    factory = ConsoleUIFactory(game)
    return game, factory


def test_first_level_places_mario(setup):
    game, factory = setup
    FirstLevel(factory)
    assert (factory.mario.x, factory.mario.y) == (39, 10)
    assert game.mario is factory.mario


def test_first_level_finish_is_last_ship(setup):
    game, factory = setup
    FirstLevel(factory)
    last = game.static_objs[-1]
    assert isinstance(last, ConsoleShip)
    assert (last.left, last.top, last.width, last.height) == (210, 20, 15, 7)


def test_first_level_enemies(setup):
    _, factory = setup
    FirstLevel(factory)
    assert len(factory.enemies) == 6
    assert all(enemy.is_active for enemy in factory.enemies)


def test_every_object_is_drawn(setup):
    game, factory = setup
    FirstLevel(factory)
    # Everything is map-movable except the player, and everything is drawn.
    assert len(factory.game_map.objs) == len(game.map_movable_objs) + 1


def test_first_level_is_not_final(setup):
    _, factory = setup
    assert FirstLevel(factory).is_final() is False


def test_restart_resets_objects(setup):
    game, factory = setup
    level = FirstLevel(factory)
    old_mario = factory.mario
    counts = (len(game.static_objs), len(game.collisionable_objs), len(game.movable_objs))
    old_mario.top_left.x += 50
    old_mario.kill()
    factory.create_money((0, 0), 3, 2)

    level.restart()

    assert factory.mario is not old_mario
    assert (factory.mario.x, factory.mario.y) == (39, 10)
    assert factory.mario.is_active
    assert factory.moneys == []
    assert (len(game.static_objs), len(game.collisionable_objs), len(game.movable_objs)) == counts


def test_get_next_builds_second_level_once(setup):
    game, factory = setup
    level = FirstLevel(factory)
    first_ships = list(factory.ships)

    nxt = level.get_next()

    assert isinstance(nxt, SecondLevel)
    assert nxt.is_final() is True
    assert (factory.mario.x, factory.mario.y) == (16, 19)
    assert level.get_next() is nxt
    assert not any(ship in game.static_objs for ship in first_ships)
    last = game.static_objs[-1]
    assert (last.left, last.top, last.width, last.height) == (190, 5, 11, 26)


def test_second_level_has_no_next(setup):
    _, factory = setup
    assert SecondLevel(factory).get_next() is None


def test_second_level_restart(setup):
    game, factory = setup
    level = SecondLevel(factory)
    static_count = len(game.static_objs)
    factory.mario.top_left.y = 100
    level.restart()
    assert (factory.mario.x, factory.mario.y) == (16, 19)
    assert len(game.static_objs) == static_count


def test_game_level_is_abstract(setup):
    _, factory = setup
    with pytest.raises(TypeError):
        GameLevel(factory)