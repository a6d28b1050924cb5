import logging
import math
from dataclasses import dataclass, field

import pygame

from wrapteroids.config import (
    ASTEROID_BASE_COUNT,
    ASTEROID_MAX_RADIUS,
    ASTEROID_PER_LEVEL,
    ASTEROID_SPEED,
    BULLET_SPEED,
    HALF_WORLD,
    MAX_PLACEMENT_ATTEMPTS,
    PLAYER_ANGLE,
    PLAYER_LENGTH,
    PLAYER_SAFE_RADIUS,
    WORLD_SIZE,
)
from wrapteroids.geometry import circles_collide


logger = logging.getLogger(__name__)


def _vec():
    return pygame.Vector2(0, 0)


@dataclass
class Player:
    pos: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(HALF_WORLD, HALF_WORLD))
    vel: pygame.Vector2 = field(default_factory=_vec)
    dir: float = 0.0

    def probe_points(self):
        """Center plus the two rear corners of the ship silhouette."""
        half = PLAYER_ANGLE / 2
        points = [pygame.Vector2(self.pos)]
        for angle in (self.dir + half, self.dir - half):
            points.append(
                pygame.Vector2(
                    self.pos.x - PLAYER_LENGTH * math.cos(angle),
                    self.pos.y + PLAYER_LENGTH * math.sin(angle),
                )
            )
        return points


@dataclass
class Asteroid:
    pos: pygame.Vector2
    vel: pygame.Vector2
    radius: float

    @property
    def mass(self):
        return self.radius * self.radius


@dataclass
class Bullet:
    pos: pygame.Vector2
    prev: pygame.Vector2
    vel: pygame.Vector2
    alive: bool = True
    # set once the bullet has flown off the field; it is dropped next frame
    leaving: bool = False

    def travel_angle(self):
        return math.atan2(self.pos.y - self.prev.y, self.pos.x - self.prev.x)

    def out_of_bounds(self):
        edge = WORLD_SIZE - 1
        return self.pos.x < 0 or self.pos.x > edge or self.pos.y < 0 or self.pos.y > edge


def spawn_asteroid(rng, x, y, max_radius):
    if max_radius <= 0:
        raise ValueError(f"asteroid radius must be positive, got {max_radius}")
    radius = 0.7 * max_radius + 0.3 * max_radius * rng.random()
    velocity = pygame.Vector2(
        rng.uniform(-ASTEROID_SPEED, ASTEROID_SPEED),
        rng.uniform(-ASTEROID_SPEED, ASTEROID_SPEED),
    )
    return Asteroid(pos=pygame.Vector2(x, y), vel=velocity, radius=radius)


def spawn_bullet(x, y, angle):
    # screen y grows downward
    velocity = pygame.Vector2(BULLET_SPEED * math.cos(angle), -BULLET_SPEED * math.sin(angle))
    return Bullet(pos=pygame.Vector2(x, y), prev=pygame.Vector2(x, y), vel=velocity)


def asteroid_count(level):
    return ASTEROID_BASE_COUNT + ASTEROID_PER_LEVEL * level


def _placement_is_clear(x, y, asteroids, player):
    for other in asteroids:
        if circles_collide(x, y, ASTEROID_MAX_RADIUS, other.pos.x, other.pos.y, other.radius):
            return False
    return not circles_collide(
        player.pos.x, player.pos.y, PLAYER_SAFE_RADIUS, x, y, ASTEROID_MAX_RADIUS
    )


def fill_asteroids(rng, player, level, asteroids=None):
    """Scatter a fresh field of non-overlapping asteroids away from the player.

    Appends to ``asteroids`` when given and returns the list. Each asteroid gets
    up to MAX_PLACEMENT_ATTEMPTS random positions; one that finds no free spot
    is left out.
    """
    if asteroids is None:
        asteroids = []
    wanted = asteroid_count(level)
    skipped = 0
    for _ in range(wanted):
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            x = rng.random() * WORLD_SIZE
            y = rng.random() * WORLD_SIZE
            if _placement_is_clear(x, y, asteroids, player):
                asteroids.append(spawn_asteroid(rng, x, y, ASTEROID_MAX_RADIUS))
                break
        else:
            skipped += 1
    if skipped:
        logger.warning(
            "Placed %d of %d asteroids for level %d; no free spot for the rest",
            wanted - skipped,
            wanted,
            level,
        )
    logger.debug("Filled level %d with %d asteroids", level, len(asteroids))
    return asteroids
