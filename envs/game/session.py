from .constants import STARTING_LIVES


class Session:
    """Score, lives and the per-level timer shown on the HUD."""

    def __init__(self):
        self.score = 0
        self.lives = STARTING_LIVES
        self.level_time = 0.0
        self.timer_running = False

    def tick(self, dt):
        if self.timer_running:
            self.level_time += dt

    def start_timer(self):
        self.timer_running = True

    def stop_timer(self):
        self.timer_running = False

    def reset_timer(self):
        self.level_time = 0.0
        self.timer_running = False

    def reset(self):
        # New game only; level loads keep score and lives
        self.score = 0
        self.lives = STARTING_LIVES
        self.reset_timer()
