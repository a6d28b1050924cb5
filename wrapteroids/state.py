from dataclasses import dataclass
from typing import Optional

from wrapteroids.config import START_LIVES


@dataclass
class GameState:
    score: int = 0
    lives: int = START_LIVES
    level: int = 0
    invincibility: float = 0.0
    playing: bool = True
    # host timestamp of the previous frame, None until the first frame
    elapsed: Optional[float] = None

    @property
    def invincible(self):
        return self.invincibility > 0


@dataclass
class InputState:
    """Held keys plus last frame's fire/down flags for edge detection."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False
    prev_fire: bool = False
    prev_down: bool = False

    def set_flag(self, name, pressed):
        setattr(self, name, pressed)

    @property
    def fire_pressed(self):
        return self.fire and not self.prev_fire

    @property
    def down_pressed(self):
        return self.down and not self.prev_down

    def latch(self):
        self.prev_fire = self.fire
        self.prev_down = self.down
