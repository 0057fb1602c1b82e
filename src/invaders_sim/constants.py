"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
WINDOW_SIZE = (800, 600)

# play field
FIELD_TOP = 0.0
FIELD_BOTTOM = 600.0
FORMATION_LEFT_EDGE = 20.0
FORMATION_RIGHT_EDGE = 780.0
GROUND_Y = 520.0

# player
PLAYER_START = (400.0, 550.0)
PLAYER_SIZE = (30.0, 20.0)
PLAYER_STEP = 5.0
PLAYER_MIN_X = 30.0
PLAYER_MAX_X = 700.0
PLAYER_LIVES = 3
PLAYER_EXPLOSION_TICKS = 13  # ~208ms at 60 FPS

# aliens
ALIEN_SIZE = (25.0, 20.0)
ALIEN_ROWS = 5
ALIEN_COLS = 11
ALIEN_GRID_ORIGIN = (100.0, 50.0)
ALIEN_GRID_GAP = (50.0, 40.0)
ALIEN_SCORE = 10
FORMATION_START_SPEED = 2.0
FORMATION_MAX_SPEED = 8.0
FORMATION_SPEEDUP = 0.1
FORMATION_DROP = 20.0
ALIEN_FIRE_INTERVAL = 30

# bullets
BULLET_SIZE = (3.0, 15.0)
PLAYER_BULLET_VELOCITY = (0.0, -8.0)
ALIEN_BULLET_VELOCITY = (0.0, 5.0)
MAX_PLAYER_BULLETS = 3

# end of game
WIN_MESSAGE = "You win! All aliens destroyed."
NO_LIVES_MESSAGE = "Game over! No lives left."
INVASION_MESSAGE = "Game over! The aliens reached the ground."
