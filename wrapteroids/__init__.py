"""Asteroids on a 256x256 torus."""

from wrapteroids.simulation import Simulation
from wrapteroids.state import GameState, InputState

__all__ = ["Simulation", "GameState", "InputState"]
