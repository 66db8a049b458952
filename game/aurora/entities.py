"""
Game entity dataclasses
"""

import math
from dataclasses import dataclass, field
from typing import Tuple

from .config import SHIP_CONFIG, WORLD_CONFIG
from .utils import rand, wrap_padded
from .vector import Vector2

PLANET = "planet"
ASTEROID = "asteroid"
MINERAL = "mineral"


@dataclass
class Body:
    """
    Planet, asteroid or mineral. Shared motion/geometry plus per-kind payload;
    fields that do not apply to a kind keep their defaults.
    """
    kind: str
    pos: Vector2
    radius: float
    vel: Vector2 = field(default_factory=Vector2)

    # Planet
    hue: float = 0.0
    name: str = ""

    # Asteroid (cosmetic only, collision uses radius)
    rotation: float = 0.0
    silhouette: Tuple[float, ...] = ()

    # Mineral
    collected: bool = False
    pulse_phase: float = 0.0

    def update(self, dt: float, width: float, height: float,
               margin: float = WORLD_CONFIG["wrap_margin"],
               frame_scale: float = WORLD_CONFIG["frame_scale"]):
        """Integrate drift and wrap around the padded viewport"""
        self.pos = self.pos.add(self.vel.scale(dt * frame_scale))
        self.pos = wrap_padded(self.pos, width, height, margin)


@dataclass
class Ship:
    """Player ship"""
    pos: Vector2
    vel: Vector2 = field(default_factory=Vector2)
    angle: float = SHIP_CONFIG["initial_angle"]  # radians, 0 faces +x
    fuel: float = SHIP_CONFIG["max_fuel"]
    radius: float = 12.0
    alive: bool = True
    tractor_active: bool = False
    thrusting: bool = False

    @property
    def speed(self) -> float:
        return self.vel.magnitude()


def make_planet(x: float, y: float, radius: float, hue: float, name: str = "Planet") -> Body:
    return Body(kind=PLANET, pos=Vector2(x, y), radius=radius, hue=hue, name=name)


def make_asteroid(x: float, y: float, radius: float, cfg: dict = WORLD_CONFIG) -> Body:
    """Asteroid with a random constant drift, rotation and 8-point silhouette"""
    lo, hi = cfg["asteroid_drift"]
    j_lo, j_hi = cfg["asteroid_jitter"]
    return Body(
        kind=ASTEROID,
        pos=Vector2(x, y),
        radius=radius,
        vel=Vector2(rand(lo, hi), rand(lo, hi)),
        rotation=rand(0, math.pi * 2),
        silhouette=tuple(rand(j_lo, j_hi) for _ in range(cfg["asteroid_points"])),
    )


def make_mineral(x: float, y: float, radius: float = WORLD_CONFIG["mineral_radius"]) -> Body:
    return Body(kind=MINERAL, pos=Vector2(x, y), radius=radius, pulse_phase=rand(0, math.pi * 2))
