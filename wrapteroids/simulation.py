"""Frame-by-frame game logic.

``Simulation.update`` is driven by the host once per display refresh with a
millisecond timestamp. Everything the game owns lives on the instance; the
host only forwards key events and receives snapshots and sound cues.
"""

import logging
import math
import random

from wrapteroids import collisions
from wrapteroids.config import (
    BULLET_SPEED,
    CUE_BUMP,
    CUE_EXPLOSION,
    CUE_LASER,
    CUE_PLAYER_HIT,
    HIT_SCORE,
    INVINCIBILITY_TIME,
    KEY_BINDINGS,
    PLAYER_SPEED,
    PLAYER_TURN_SPEED,
    WORLD_SIZE,
)
from wrapteroids.entities import Player, fill_asteroids, spawn_bullet
from wrapteroids.geometry import wrap, wrap_position
from wrapteroids.presentation import make_snapshot
from wrapteroids.state import GameState, InputState


logger = logging.getLogger(__name__)


def _ignore(*args):
    pass


class Simulation:
    def __init__(self, rng=None, render=None, audio=None):
        self.rng = rng if rng is not None else random.Random()
        self.render = render or _ignore
        self.audio = audio or _ignore
        self.input = InputState()
        self.reset()

    def reset(self):
        self.state = GameState()
        self.player = Player()
        self.bullets = []
        self.asteroids = fill_asteroids(self.rng, self.player, self.state.level)
        # a held fire key should not also shoot on the first frame
        self.input.latch()
        logger.info("New game: %d asteroids", len(self.asteroids))

    def on_key_down(self, key):
        name = KEY_BINDINGS.get(key)
        if name is not None:
            self.input.set_flag(name, True)

    def on_key_up(self, key):
        name = KEY_BINDINGS.get(key)
        if name is not None:
            self.input.set_flag(name, False)

    def _delta_time(self, elapsed):
        previous = self.state.elapsed
        self.state.elapsed = elapsed
        if previous is None:
            return 0.0
        dt = (elapsed - previous) / 1000.0
        if not math.isfinite(dt):
            logger.debug("Non-finite frame delta from %r -> %r", previous, elapsed)
            return 0.0
        return dt

    def update(self, elapsed):
        dt = self._delta_time(elapsed)
        state = self.state

        if not state.playing:
            if self.input.fire_pressed:
                self.reset()
            self.input.latch()
            return self._emit()

        if state.invincibility > 0:
            state.invincibility -= dt

        self._step_asteroids(dt)
        self._step_bullets(dt)
        self._apply_input(dt)

        self.player.pos = wrap_position(self.player.pos + self.player.vel * dt)

        self.input.latch()
        return self._emit()

    def _step_asteroids(self, dt):
        for i, asteroid in enumerate(self.asteroids):
            move = asteroid.vel * dt
            asteroid.pos = wrap_position(asteroid.pos + move)
            if collisions.resolve_asteroid_collision(self.asteroids, i):
                self.audio(CUE_BUMP)
                asteroid.pos = wrap_position(asteroid.pos - move)
            if self._player_exposed() and collisions.asteroid_hits_player(asteroid, self.player):
                self._damage_player()

    def _player_exposed(self):
        return self.state.playing and not self.state.invincible

    def _damage_player(self):
        state = self.state
        self.audio(CUE_PLAYER_HIT)
        state.lives -= 1
        if state.lives <= 0:
            state.lives = 0
            state.playing = False
            logger.info("Game over: score %d, level %d", state.score, state.level)
        else:
            state.invincibility = INVINCIBILITY_TIME
            logger.debug("Player hit, %d lives left", state.lives)

    def _on_bullet_hit(self):
        self.state.score += HIT_SCORE
        self.audio(CUE_EXPLOSION)

    def _on_field_cleared(self):
        self.state.level += 1
        fill_asteroids(self.rng, self.player, self.state.level, self.asteroids)
        logger.info("Level %d: %d asteroids", self.state.level, len(self.asteroids))

    def _step_bullets(self, dt):
        collisions.resolve_bullet_hits(
            self.bullets, self.asteroids, self._on_bullet_hit, self._on_field_cleared
        )
        # a bullet that left the field last frame still got the hit test above
        for bullet in self.bullets:
            if bullet.leaving:
                bullet.alive = False
            bullet.prev = bullet.pos.copy()
            bullet.pos += bullet.vel * BULLET_SPEED * dt
            if bullet.out_of_bounds():
                bullet.leaving = True
        self.bullets = [bullet for bullet in self.bullets if bullet.alive]

    def _apply_input(self, dt):
        player = self.player
        keys = self.input
        if keys.left:
            player.dir += PLAYER_TURN_SPEED * dt
        if keys.right:
            player.dir -= PLAYER_TURN_SPEED * dt
        if keys.up:
            player.vel.x += PLAYER_SPEED * math.cos(player.dir) * dt
            player.vel.y -= PLAYER_SPEED * math.sin(player.dir) * dt
        if keys.fire_pressed:
            self.audio(CUE_LASER)
            self.bullets.append(spawn_bullet(player.pos.x, player.pos.y, player.dir))
        if keys.down_pressed:
            # teleports can land inside an asteroid
            player.pos.x = wrap(self.rng.random() * WORLD_SIZE)
            player.pos.y = wrap(self.rng.random() * WORLD_SIZE)

    def _emit(self):
        snapshot = make_snapshot(self.state, self.player, self.asteroids, self.bullets)
        self.render(snapshot)
        return snapshot
