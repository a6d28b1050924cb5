import math
import os

import pygame


WORLD_SIZE = 256
HALF_WORLD = WORLD_SIZE / 2
EDGE = WORLD_SIZE - 1

HUD_HEIGHT = 40
SCALE = 3
WIDTH = WORLD_SIZE * SCALE
HEIGHT = (WORLD_SIZE + HUD_HEIGHT) * SCALE
FPS = 60

PLAYER_LENGTH = 10
PLAYER_ANGLE = math.pi / 4
PLAYER_SPEED = 150
PLAYER_TURN_SPEED = math.pi  # radians/sec
PLAYER_SAFE_RADIUS = 30

START_LIVES = 3
INVINCIBILITY_TIME = 3.0
FLICKER_RATE = 8

BULLET_SPEED = 50
BULLET_SUBSTEPS = 20
BULLET_HIT_RADIUS = 1

ASTEROID_SPEED = 23
ASTEROID_MAX_RADIUS = 20
ASTEROID_MIN_SPLIT_RADIUS = 5
ASTEROID_BASE_COUNT = 10
ASTEROID_PER_LEVEL = 2
MAX_PLACEMENT_ATTEMPTS = 1000

HIT_SCORE = 10

CUE_BUMP = "bump"
CUE_EXPLOSION = "explosion"
CUE_PLAYER_HIT = "explosion2"
CUE_LASER = "laser"
CUES = (CUE_BUMP, CUE_EXPLOSION, CUE_PLAYER_HIT, CUE_LASER)

SOUND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sounds")

KEY_BINDINGS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_SPACE: "fire",
    pygame.K_z: "fire",
}

COLORS = {
    "bg": (0, 0, 0),
    "ship": (255, 255, 255),
    "bullet": (255, 255, 255),
    "asteroid": (255, 255, 255),
    "ui": (255, 255, 255),
    "overlay": (0, 0, 0),
}
