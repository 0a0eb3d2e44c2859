import pytest

from envs.game.constants import MAX_DT, STARTING_LIVES
from envs.game.flow import CONFIRM_COMMANDS, Command, Game, clamp_dt
from envs.game.simulation import Event, InputState
from envs.game.world import GameState

DT = 1.0 / 60


def start_playing(game):
    assert game.dispatch(Command.START)
    assert game.state is GameState.PLAYING


def reach_goal(game):
    goal = game.world.goal.rect
    player = game.world.player
    player.rect.x, player.rect.y = goal.x, goal.y
    events = game.tick(DT)
    assert Event.LEVEL_COMPLETE in events
    assert game.state is GameState.LEVEL_COMPLETE


@pytest.fixture
def game():
    return Game()


def test_new_game_waits_on_the_title_screen(game):
    assert game.state is GameState.MENU
    assert game.world.level_index == 0
    assert game.world.session.timer_running is False


def test_start_begins_play_and_the_timer(game):
    start_playing(game)
    assert game.world.session.timer_running is True
    game.tick(0.05)
    assert game.world.session.level_time == pytest.approx(0.05)


def test_menu_does_not_simulate(game):
    before = (game.world.player.rect.x, game.world.player.rect.y)
    assert game.tick(0.05, InputState(right=True)) == []
    assert (game.world.player.rect.x, game.world.player.rect.y) == before
    assert game.world.session.level_time == 0.0


def test_pause_toggles_and_freezes_the_world(game):
    start_playing(game)
    game.tick(DT)
    assert game.dispatch(Command.PAUSE)
    assert game.state is GameState.PAUSED

    frozen = (game.world.player.rect.x, game.world.player.rect.y, game.world.session.level_time)
    enemy_x = game.world.enemies[0].rect.x
    for _ in range(10):
        assert game.tick(DT, InputState(right=True)) == []
    assert (game.world.player.rect.x, game.world.player.rect.y, game.world.session.level_time) == frozen
    assert game.world.enemies[0].rect.x == enemy_x

    assert game.dispatch(Command.PAUSE)
    assert game.state is GameState.PLAYING


@pytest.mark.parametrize("state,command", [
    (GameState.MENU, Command.PAUSE),
    (GameState.MENU, Command.ADVANCE),
    (GameState.MENU, Command.RESTART),
    (GameState.PLAYING, Command.START),
    (GameState.PLAYING, Command.ADVANCE),
    (GameState.PLAYING, Command.RESTART),
    (GameState.PAUSED, Command.START),
    (GameState.PAUSED, Command.ADVANCE),
    (GameState.PAUSED, Command.RESTART),
    (GameState.LEVEL_COMPLETE, Command.START),
    (GameState.LEVEL_COMPLETE, Command.PAUSE),
    (GameState.LEVEL_COMPLETE, Command.RESTART),
    (GameState.GAME_OVER, Command.START),
    (GameState.GAME_OVER, Command.PAUSE),
    (GameState.GAME_OVER, Command.ADVANCE),
])
def test_commands_out_of_place_are_ignored(game, state, command):
    game.world.state = state
    game.world.session.score = 300
    assert game.dispatch(command) is False
    assert game.state is state
    assert game.world.session.score == 300
    assert game.world.level_index == 0


def test_goal_then_advance_loads_next_level_title(game):
    start_playing(game)
    game.world.session.score = 500
    reach_goal(game)
    frozen = game.world.session.level_time
    assert game.tick(DT) == []
    assert game.world.session.level_time == frozen

    assert game.dispatch(Command.ADVANCE)
    assert game.state is GameState.MENU
    assert game.world.level_index == 1
    assert game.world.session.score == 500
    assert game.world.session.level_time == 0.0

    # A second start is needed to play the new level
    start_playing(game)


def test_advance_after_last_level_ends_the_game(game):
    game.world.load_level(len(game.world.levels) - 1)
    start_playing(game)
    reach_goal(game)
    assert game.dispatch(Command.ADVANCE)
    assert game.state is GameState.GAME_OVER


def test_restart_after_game_over_is_a_fresh_game(game):
    game.world.load_level(2)
    start_playing(game)
    game.world.session.score = 1200
    game.world.session.lives = 1
    player = game.world.player
    player.rect.y = game.world.height + 500
    assert game.tick(DT)[-1] is Event.GAME_OVER
    assert game.state is GameState.GAME_OVER

    # Game over stops the simulation
    assert game.tick(DT) == []

    assert game.dispatch(Command.RESTART)
    session = game.world.session
    assert game.state is GameState.MENU
    assert game.world.level_index == 0
    assert (session.score, session.lives, session.level_time) == (0, STARTING_LIVES, 0.0)
    assert session.timer_running is False


def test_confirm_follows_the_screen(game):
    assert CONFIRM_COMMANDS == {
        GameState.MENU: Command.START,
        GameState.LEVEL_COMPLETE: Command.ADVANCE,
        GameState.GAME_OVER: Command.RESTART,
    }
    assert game.confirm()
    assert game.state is GameState.PLAYING
    assert game.confirm() is False
    reach_goal(game)
    assert game.confirm()
    assert game.state is GameState.MENU
    assert game.world.level_index == 1


@pytest.mark.parametrize("raw,expected", [
    (0.016, 0.016),
    (MAX_DT, MAX_DT),
    (0.5, MAX_DT),
    (3.0, MAX_DT),
    (-0.2, 0.0),
])
def test_clamp_dt(raw, expected):
    assert clamp_dt(raw) == expected


def test_stalled_frame_is_clamped(game):
    start_playing(game)
    game.tick(2.0)
    assert game.world.session.level_time == pytest.approx(MAX_DT)


def test_tick_uses_held_input_by_default(game):
    start_playing(game)
    x = game.world.player.rect.x
    game.input.right = True
    game.tick(0.05)
    assert game.world.player.rect.x > x
