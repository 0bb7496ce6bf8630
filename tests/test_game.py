from __future__ import annotations

import pytest

import main as main_module
from core.actors import Coin, Fireball, Player
from core.config import DEFAULT_MAX_TIME, MAX_STEP
from core.controllers import PlayerController
from core.level import Level
from core.maths import Vector
from core.parser import DEFAULT_ACTORS, LevelParser
from game import PlatformerGame
from levels import create_level, list_available_levels, load_level_plan


class _FixedRandom:
    def random(self) -> float:
        return 0.0


FLOOR_PLAN = [
    "      ",
    " @    ",
    "xxxxxx",
    "      ",
]


def _level_with(*others, plan=FLOOR_PLAN) -> Level:
    parser = LevelParser({"@": Player})
    actors = parser.create_actors(plan) + list(others)
    return Level(parser.create_grid(plan), actors)


def test_game_requires_a_player() -> None:
    with pytest.raises(ValueError, match="no player"):
        PlatformerGame(lambda: Level([[None]]), headless=True)


def test_headless_run_requires_a_limit() -> None:
    game = PlatformerGame(_level_with, headless=True)
    with pytest.raises(ValueError, match="max_steps or max_time"):
        game.run()


def test_fireball_contact_loses_and_finishes_one_tick_later() -> None:
    ball = Fireball(Vector(1.5, 1))
    game = PlatformerGame(lambda: _level_with(ball), headless=True)

    game.step(MAX_STEP)
    assert game.level.status == "lost"
    assert game.level.finish_delay == 0
    assert game.level.is_finished() is False

    game.step(MAX_STEP)
    assert game.level.is_finished() is True


def test_run_stops_once_level_is_finished() -> None:
    coin = Coin(Vector(1, 1), rng=_FixedRandom())
    game = PlatformerGame(lambda: _level_with(coin), headless=True)

    result = game.run(max_steps=10)

    assert result["status"] == "won"
    assert result["steps"] == 2
    assert result["coins_left"] == 0
    assert result["time"] > 0.0


def test_run_respects_step_limit() -> None:
    coin = Coin(Vector(4, 1), rng=_FixedRandom())
    game = PlatformerGame(lambda: _level_with(coin), headless=True)

    result = game.run(max_steps=3)

    assert result == {
        "status": None,
        "time": pytest.approx(3 / 60),
        "steps": 3,
        "coins_left": 1,
    }


def test_step_clamps_long_frames() -> None:
    ball = Fireball(Vector(3, 0), Vector(1, 0))
    game = PlatformerGame(lambda: _level_with(ball), headless=True)

    game.step(10.0)

    assert ball.pos.x == pytest.approx(3 + MAX_STEP)


def test_reset_reloads_a_fresh_level() -> None:
    game = PlatformerGame(_level_with, headless=True)
    first = game.level
    game.level.status = "lost"

    game.reset()

    assert game.level is not first
    assert game.level.status is None


def test_controller_moves_player_right() -> None:
    level = _level_with()
    player = level.player

    PlayerController().update(player, level, {"right": True}, MAX_STEP)

    assert player.pos.x == pytest.approx(1 + 7.0 * MAX_STEP)
    assert player.pos.y == pytest.approx(0.5)
    assert player.speed.y == 0.0


def test_controller_is_blocked_by_wall() -> None:
    level = _level_with(plan=["      ", " @x   ", "xxxxxx", "      "])
    player = level.player

    PlayerController().update(player, level, {"right": True}, MAX_STEP)

    assert player.pos.x == 1
    assert level.status is None


def test_controller_reports_lava() -> None:
    level = _level_with(plan=["      ", " @    ", "x!xxxx", "      "])

    PlayerController().update(level.player, level, {}, MAX_STEP)

    assert level.status == "lost"


def test_controller_jumps_only_from_ground() -> None:
    level = _level_with(plan=["      ", "      ", "      ", " @    ", "xxxxxx", "      "])
    player = level.player
    controller = PlayerController()

    controller.update(player, level, {"jump": True}, MAX_STEP)
    assert player.speed.y == -controller.jump_speed

    controller.update(player, level, {"jump": True}, MAX_STEP)
    assert player.pos.y < 2.5
    assert player.speed.y > -controller.jump_speed


def test_falling_out_of_the_level_is_lava() -> None:
    level = _level_with(plan=["      ", " @    ", "      "])
    controller = PlayerController()
    for _ in range(40):
        controller.update(level.player, level, {}, MAX_STEP)
        if level.status is not None:
            break
    assert level.status == "lost"


def test_level_registry_lists_bundled_levels() -> None:
    assert list_available_levels() == ["level_fireballs", "level_intro", "level_rain"]


@pytest.mark.parametrize("name", ["level_fireballs", "level_intro", "level_rain"])
def test_bundled_levels_parse_into_playable_levels(name: str) -> None:
    level = create_level(name)
    assert level.player is not None
    assert not level.no_more_actors("coin")
    assert level.obstacle_at(level.player.pos, level.player.size) is None


@pytest.mark.parametrize("name", ["level_fireballs", "level_intro", "level_rain"])
def test_bundled_levels_simulate_headless(name: str) -> None:
    parser = LevelParser(DEFAULT_ACTORS)
    game = PlatformerGame(lambda: create_level(name, parser), headless=True)
    result = game.run(max_steps=120)
    assert result["status"] in (None, "won", "lost")
    assert result["steps"] <= 120


def test_load_level_plan_rejects_bad_names() -> None:
    with pytest.raises(ValueError):
        load_level_plan(" ")
    with pytest.raises(ImportError):
        load_level_plan("level_missing")


def test_load_level_plan_normalizes_name() -> None:
    assert load_level_plan("Level-Intro") == load_level_plan("level_intro")


def test_cli_defaults_to_first_level() -> None:
    parser = main_module._build_parser()
    args = parser.parse_args([])
    assert args.level_name == "level_fireballs"


def test_parse_args_headless_gets_default_time() -> None:
    parser = main_module._build_parser()
    config = main_module._parse_args(parser.parse_args(["level_intro", "--headless"]))
    assert config.headless is True
    assert config.max_time == DEFAULT_MAX_TIME
    assert config.max_steps is None


def test_main_headless_prints_results(capsys) -> None:
    main_module.main(["level_intro", "--headless", "--steps", "5", "--seed", "3"])
    out = capsys.readouterr().out
    assert "Using level level_intro" in out
    assert "Using seed: 3" in out
    assert "FINAL RESULTS" in out
    assert "Steps" in out
