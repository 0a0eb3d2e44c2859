# Constants
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
FPS = 60
MAX_DT = 0.05  # clamp for slow frames, keeps thin platforms solid

# Physics (px, px/s, px/s^2)
GRAVITY = 1600.0
MOVE_SPEED = 260.0
JUMP_POWER = 600.0
EPSILON = 0.01
FALL_MARGIN = 200

# Entities
PLAYER_WIDTH = 26
PLAYER_HEIGHT = 30
PLAYER_SPAWN_X = 24
PLAYER_SPAWN_OFFSET = 100  # spawn y is SCREEN_HEIGHT - this
COIN_SIZE = 14
ENEMY_WIDTH = 26
ENEMY_HEIGHT = 20
ENEMY_SPEED = 80.0

# Scoring
COIN_SCORE = 100
STOMP_SCORE = 200
STOMP_DEPTH = 12
STOMP_BOUNCE = 0.7
STARTING_LIVES = 3

# Colors
BACKGROUND = (20, 22, 30)
STRIPE = (30, 34, 46)
PLATFORM_FILL = (90, 110, 140)
PLATFORM_EDGE = (70, 85, 110)
COIN_FILL = (255, 226, 120)
COIN_EDGE = (230, 170, 70)
ENEMY_FILL = (255, 96, 96)
ENEMY_EDGE = (120, 30, 30)
PLAYER_BODY = (255, 202, 88)
PLAYER_VISOR = (60, 70, 90)
GOAL_POLE = (190, 190, 210)
GOAL_OPEN = (120, 240, 160)
GOAL_CLOSED = (140, 160, 180)
HUD_TEXT = (240, 240, 255)
TITLE_TEXT = (220, 230, 255)
OVERLAY_TEXT = (230, 240, 255)
OVERLAY_SHADE = (0, 0, 0, 120)
