from envs.game.constants import STARTING_LIVES
from envs.game.session import Session


def test_fresh_session():
    s = Session()
    assert (s.score, s.lives, s.level_time, s.timer_running) == (0, STARTING_LIVES, 0.0, False)


def test_timer_only_counts_while_running():
    s = Session()
    s.tick(0.5)
    assert s.level_time == 0.0
    s.start_timer()
    s.tick(0.5)
    s.stop_timer()
    s.tick(0.5)
    assert s.level_time == 0.5


def test_reset_timer_keeps_score_and_lives():
    s = Session()
    s.score, s.lives = 700, 1
    s.start_timer()
    s.tick(2.0)
    s.reset_timer()
    assert (s.score, s.lives, s.level_time, s.timer_running) == (700, 1, 0.0, False)


def test_reset_starts_a_new_game():
    s = Session()
    s.score, s.lives, s.level_time = 900, 0, 12.5
    s.reset()
    assert (s.score, s.lives, s.level_time, s.timer_running) == (0, STARTING_LIVES, 0.0, False)
