from .flow import Command, Game
from .geometry import Rect, overlaps
from .levels import Level, build_levels, load_levels
from .simulation import Event, InputState, advance
from .world import GameState, World
