"""Coordinate helpers for the wrap-around playfield."""

import pygame

from wrapteroids.config import EDGE, HALF_WORLD, WORLD_SIZE


def wrap(value):
    wrapped = value % WORLD_SIZE
    # tiny negative floats round up to WORLD_SIZE
    if wrapped >= WORLD_SIZE:
        wrapped -= WORLD_SIZE
    return wrapped


def wrap_position(pos):
    return pygame.Vector2(wrap(pos.x), wrap(pos.y))


def torus_delta(a, b):
    """Shortest distance between two coordinates on one axis of the torus."""
    d = abs(b - a) % WORLD_SIZE
    if d > HALF_WORLD:
        d = WORLD_SIZE - d
    return d


def circles_collide(x1, y1, r1, x2, y2, r2):
    dx = torus_delta(x1, x2)
    dy = torus_delta(y1, y2)
    reach = r1 + r2
    return dx * dx + dy * dy <= reach * reach


def lerp(a, b, t):
    return t * a + (1 - t) * b


def clamp(value):
    if value < 0:
        return 0
    if value > EDGE:
        return EDGE
    return value


def wrap_offsets(x, y, radius):
    """Offsets at which a circle must also be drawn so it shows across edges.

    Always starts with (0, 0). A circle poking over one edge gets one extra
    copy on the opposite side, and one poking over a corner gets three.
    """
    offsets = [(0, 0)]
    dxs = []
    dys = []
    if x - radius < 0:
        dxs.append(WORLD_SIZE)
    if x + radius > EDGE:
        dxs.append(-WORLD_SIZE)
    if y - radius < 0:
        dys.append(WORLD_SIZE)
    if y + radius > EDGE:
        dys.append(-WORLD_SIZE)
    for dx in dxs:
        offsets.append((dx, 0))
    for dy in dys:
        offsets.append((0, dy))
    for dx in dxs:
        for dy in dys:
            offsets.append((dx, dy))
    return offsets
