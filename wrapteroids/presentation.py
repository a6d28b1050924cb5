"""Everything between the simulation and the screen/speakers.

The simulation hands over a frozen ``Snapshot`` each frame. Drawing works in
two passes: ``build_draw_commands`` turns the snapshot into a flat tuple of
commands, one per visible copy of an entity, and ``PygameRenderer`` paints
them. Sound cues are plain strings played by ``PygameAudio``.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Tuple

import pygame

from wrapteroids.config import (
    COLORS,
    CUES,
    FLICKER_RATE,
    HUD_HEIGHT,
    PLAYER_ANGLE,
    PLAYER_LENGTH,
    SOUND_DIR,
    WORLD_SIZE,
)
from wrapteroids.geometry import wrap_offsets


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    dir: float


@dataclass(frozen=True)
class AsteroidView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    prev_x: float
    prev_y: float


@dataclass(frozen=True)
class Snapshot:
    player: PlayerView
    asteroids: Tuple[AsteroidView, ...]
    bullets: Tuple[BulletView, ...]
    score: int
    lives: int
    level: int
    playing: bool
    invincibility: float

    @property
    def player_visible(self):
        return player_visible(self.invincibility)


@dataclass(frozen=True)
class DrawCommand:
    kind: str
    entity: object
    offset: Tuple[float, float] = (0, 0)


def player_visible(invincibility):
    """Blink the ship while invincible."""
    if invincibility <= 0:
        return True
    return (invincibility * FLICKER_RATE) % 2 > 0.5


def make_snapshot(state, player, asteroids, bullets):
    return Snapshot(
        player=PlayerView(player.pos.x, player.pos.y, player.dir),
        asteroids=tuple(AsteroidView(a.pos.x, a.pos.y, a.radius) for a in asteroids),
        bullets=tuple(BulletView(b.pos.x, b.pos.y, b.prev.x, b.prev.y) for b in bullets),
        score=state.score,
        lives=state.lives,
        level=state.level,
        playing=state.playing,
        invincibility=state.invincibility,
    )


def build_draw_commands(snapshot):
    commands = []
    if snapshot.playing and snapshot.player_visible:
        player = snapshot.player
        for offset in wrap_offsets(player.x, player.y, PLAYER_LENGTH):
            commands.append(DrawCommand("player", player, offset))
    for asteroid in snapshot.asteroids:
        for offset in wrap_offsets(asteroid.x, asteroid.y, asteroid.radius):
            commands.append(DrawCommand("asteroid", asteroid, offset))
    for bullet in snapshot.bullets:
        commands.append(DrawCommand("bullet", bullet))
    return tuple(commands)


def ship_lines(x, y, heading):
    """The two strokes of the ship, both starting at its nose."""
    half = PLAYER_ANGLE / 2
    lines = []
    for angle in (heading + half, heading - half):
        tail = (x - PLAYER_LENGTH * math.cos(angle), y + PLAYER_LENGTH * math.sin(angle))
        lines.append(((x, y), tail))
    return lines


class PygameRenderer:
    """Paints snapshots into a world-sized buffer and scales it to the window."""

    def __init__(self, target, font=None, big_font=None, small_font=None):
        self.target = target
        self.buffer = pygame.Surface((WORLD_SIZE, WORLD_SIZE + HUD_HEIGHT))
        self.font = font or pygame.font.SysFont("Arial", 20)
        self.big_font = big_font or pygame.font.SysFont("Arial", 40)
        self.small_font = small_font or pygame.font.SysFont("Arial", 10)

    def __call__(self, snapshot):
        self.draw(snapshot)

    def draw(self, snapshot):
        surface = self.buffer
        surface.fill(COLORS["bg"])
        for command in build_draw_commands(snapshot):
            self._draw_command(surface, command)
        self._draw_hud(surface, snapshot)
        if not snapshot.playing:
            self._draw_game_over(surface)
        if self.target.get_size() != surface.get_size():
            surface = pygame.transform.scale(surface, self.target.get_size())
        self.target.blit(surface, (0, 0))

    def _draw_command(self, surface, command):
        entity = command.entity
        dx, dy = command.offset
        if command.kind == "player":
            for start, end in ship_lines(entity.x + dx, entity.y + dy, entity.dir):
                pygame.draw.line(surface, COLORS["ship"], start, end, 1)
        elif command.kind == "asteroid":
            center = (int(entity.x + dx), int(entity.y + dy))
            pygame.draw.circle(surface, COLORS["asteroid"], center, max(1, int(entity.radius)), 1)
        elif command.kind == "bullet":
            pygame.draw.line(
                surface,
                COLORS["bullet"],
                (entity.x, entity.y),
                (entity.prev_x, entity.prev_y),
                1,
            )
        else:
            raise ValueError(f"unknown draw command {command.kind!r}")

    def _draw_hud(self, surface, snapshot):
        pygame.draw.rect(surface, COLORS["bg"], pygame.Rect(0, WORLD_SIZE, WORLD_SIZE, HUD_HEIGHT))
        score = self.font.render(f"Score: {snapshot.score}", True, COLORS["ui"])
        lives = self.font.render(f"Lives: {snapshot.lives}", True, COLORS["ui"])
        surface.blit(score, (0, WORLD_SIZE + 10))
        surface.blit(lives, (180, WORLD_SIZE + 10))

    def _draw_game_over(self, surface):
        pygame.draw.rect(surface, COLORS["overlay"], pygame.Rect(0, 100, WORLD_SIZE, 80))
        title = self.big_font.render("GAME OVER", True, COLORS["ui"])
        prompt = self.small_font.render("Press the fire button to play again", True, COLORS["ui"])
        surface.blit(title, (WORLD_SIZE / 2 - title.get_width() / 2, 110))
        surface.blit(prompt, (WORLD_SIZE / 2 - prompt.get_width() / 2, 160))


class PygameAudio:
    """Plays named cues; cues whose sound could not be loaded stay silent."""

    def __init__(self, sound_dir=SOUND_DIR):
        self.sounds = {}
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                logger.warning("Audio disabled: %s", exc)
                return
        for cue in CUES:
            path = os.path.join(sound_dir, f"{cue}.wav")
            try:
                self.sounds[cue] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as exc:
                logger.warning("Could not load sound %s: %s", path, exc)

    def __call__(self, cue):
        sound = self.sounds.get(cue)
        if sound is not None:
            sound.play()
