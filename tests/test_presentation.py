import dataclasses
import random

import pygame
import pytest

from wrapteroids.entities import Asteroid, Player, spawn_bullet
from wrapteroids.presentation import (
    PygameAudio,
    PygameRenderer,
    build_draw_commands,
    make_snapshot,
    player_visible,
    ship_lines,
)
from wrapteroids.state import GameState


def snapshot_of(state=None, asteroids=(), bullets=(), player=None):
    return make_snapshot(state or GameState(), player or Player(), list(asteroids), list(bullets))


def rock(x, y, radius):
    return Asteroid(pos=pygame.Vector2(x, y), vel=pygame.Vector2(), radius=radius)


@pytest.mark.parametrize(
    "invincibility, visible",
    [(0, True), (-0.2, True), (3.0, False), (2.9, True), (2.55, False), (0.1, True)],
)
def test_player_flicker(invincibility, visible):
    assert player_visible(invincibility) is visible


def test_snapshot_is_frozen():
    snapshot = snapshot_of()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.score = 10


def test_snapshot_copies_entity_state():
    player = Player()
    snapshot = snapshot_of(player=player)
    player.pos.x = 3
    assert snapshot.player.x == 128


def test_draw_commands_duplicate_edge_asteroids():
    snapshot = snapshot_of(asteroids=[rock(128, 128, 10), rock(5, 5, 10), rock(250, 128, 10)])
    commands = build_draw_commands(snapshot)
    kinds = [c.kind for c in commands]
    assert kinds.count("player") == 1
    assert kinds.count("asteroid") == 1 + 4 + 2
    corner = [c.offset for c in commands if c.kind == "asteroid" and c.entity.x == 5]
    assert sorted(corner) == [(0, 0), (0, 256), (256, 0), (256, 256)]


def test_draw_commands_hide_player_when_not_playing():
    state = GameState(playing=False)
    commands = build_draw_commands(snapshot_of(state=state))
    assert [c.kind for c in commands] == []


def test_draw_commands_hide_player_during_flicker():
    state = GameState(invincibility=3.0)
    assert build_draw_commands(snapshot_of(state=state)) == ()


def test_bullets_drawn_once():
    bullet = spawn_bullet(1, 1, 0)
    commands = build_draw_commands(snapshot_of(bullets=[bullet]))
    bullets = [c for c in commands if c.kind == "bullet"]
    assert len(bullets) == 1
    assert bullets[0].offset == (0, 0)


def test_ship_lines_start_at_nose():
    lines = ship_lines(100, 100, 0)
    assert len(lines) == 2
    assert all(start == (100, 100) for start, _ in lines)


def test_renderer_paints_world_and_overlay(fonts):
    target = pygame.Surface((256, 296))
    renderer = PygameRenderer(target)
    renderer(snapshot_of(asteroids=[rock(128, 60, 10)]))
    row = [target.get_at((x, 60))[:3] for x in range(110, 147)]
    assert (255, 255, 255) in row

    renderer(snapshot_of(state=GameState(playing=False, lives=0)))
    overlay = [target.get_at((x, y))[:3] for x in range(0, 256, 2) for y in range(100, 180, 2)]
    assert (0, 0, 0) in overlay
    assert any(pixel != (0, 0, 0) for pixel in overlay)


def test_renderer_scales_to_window(fonts):
    target = pygame.Surface((512, 592))
    PygameRenderer(target).draw(snapshot_of(asteroids=[rock(128, 60, 10)]))
    assert any(target.get_at((x, 120))[:3] != (0, 0, 0) for x in range(220, 294))


def test_audio_without_sound_files_is_silent(tmp_path):
    audio = PygameAudio(sound_dir=str(tmp_path))
    assert audio.sounds == {}
    audio("laser")
    audio("no-such-cue")
