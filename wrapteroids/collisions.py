"""Collision tests and responses for asteroids, bullets and the player.

All tests run on the torus through ``circles_collide``. The functions here
mutate the entities they are handed but never touch score, lives or sound;
callers pass callbacks for those.
"""

import logging
import math

import pygame

from wrapteroids.config import ASTEROID_MIN_SPLIT_RADIUS, BULLET_HIT_RADIUS, BULLET_SUBSTEPS
from wrapteroids.entities import Asteroid
from wrapteroids.geometry import circles_collide, clamp, lerp, wrap_position


logger = logging.getLogger(__name__)


def asteroids_touch(a, b):
    return circles_collide(a.pos.x, a.pos.y, a.radius, b.pos.x, b.pos.y, b.radius)


def elastic_collision(m1, v1, m2, v2):
    """1D elastic collision formula applied to whole velocity vectors."""
    total = m1 + m2
    new_v1 = (m1 - m2) / total * v1 + (2 * m2) / total * v2
    new_v2 = (2 * m1) / total * v1 + (m2 - m1) / total * v2
    return new_v1, new_v2


def resolve_asteroid_collision(asteroids, index):
    """Bounce ``asteroids[index]`` off the first asteroid it overlaps.

    Returns True when a bounce happened so the caller can undo this frame's
    move. Later overlaps in the same frame are left for the next frame.
    """
    a = asteroids[index]
    for j, b in enumerate(asteroids):
        if j == index:
            continue
        if asteroids_touch(a, b):
            a.vel, b.vel = elastic_collision(a.mass, a.vel, b.mass, b.vel)
            return True
    return False


def asteroid_hits_player(asteroid, player):
    for point in player.probe_points():
        if circles_collide(asteroid.pos.x, asteroid.pos.y, asteroid.radius, point.x, point.y, 0):
            return True
    return False


def bullet_hits_asteroid(bullet, asteroid):
    """Sample the bullet's last frame of travel and test each point."""
    for k in range(BULLET_SUBSTEPS):
        t = k / BULLET_SUBSTEPS
        x = clamp(lerp(bullet.pos.x, bullet.prev.x, t))
        y = clamp(lerp(bullet.pos.y, bullet.prev.y, t))
        if circles_collide(x, y, BULLET_HIT_RADIUS, asteroid.pos.x, asteroid.pos.y, asteroid.radius):
            return True
    return False


def split_asteroid(asteroid, travel_angle):
    """Two half-size children placed across the bullet's path."""
    side = pygame.Vector2(
        math.cos(travel_angle + math.pi / 2) * asteroid.radius,
        math.sin(travel_angle + math.pi / 2) * asteroid.radius,
    )
    half = asteroid.radius / 2
    first = Asteroid(
        pos=wrap_position(asteroid.pos + side / 2),
        vel=pygame.Vector2(asteroid.vel.y / 2, -asteroid.vel.x / 2),
        radius=half,
    )
    second = Asteroid(
        pos=wrap_position(asteroid.pos - side / 2),
        vel=pygame.Vector2(-asteroid.vel.y / 2, asteroid.vel.x / 2),
        radius=half,
    )
    return first, second


def destroy_asteroid(asteroids, index, bullet):
    """Split or remove the asteroid a bullet hit. Returns True if none remain."""
    asteroid = asteroids[index]
    if asteroid.radius > ASTEROID_MIN_SPLIT_RADIUS:
        first, second = split_asteroid(asteroid, bullet.travel_angle())
        asteroids[index] = first
        asteroids.append(second)
        return False
    asteroids[index] = asteroids[-1]
    asteroids.pop()
    return not asteroids


def resolve_bullet_hits(bullets, asteroids, on_hit, on_cleared):
    """Let every live bullet destroy at most one asteroid.

    ``on_hit()`` runs once per hit and ``on_cleared()`` whenever the last
    asteroid is destroyed; it is expected to refill ``asteroids`` in place.
    """
    hits = 0
    for bullet in bullets:
        if not bullet.alive:
            continue
        for index in range(len(asteroids)):
            if not bullet_hits_asteroid(bullet, asteroids[index]):
                continue
            bullet.alive = False
            hits += 1
            on_hit()
            if destroy_asteroid(asteroids, index, bullet):
                logger.debug("Asteroid field cleared")
                on_cleared()
            break
    return hits
