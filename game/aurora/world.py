"""
World - owns every entity of a mission and drives one simulation step
---------------------------------------------------------------------
- 5 named planets, 15 drifting asteroids, 25 minerals anchored near them
- One ship, stepped by the ShipController against the world's collections
- Terminal flags game_over / game_won (never both); the ship freezes until reset
- A telemetry Snapshot is produced after every step for the presentation layer

The world never draws and never reads devices: input arrives as an Intents
snapshot and the frame delta is clamped to max_dt before use.
"""

from __future__ import annotations

import math
import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .config import MESSAGES, PLANET_NAMES, SHIP_CONFIG, WORLD_CONFIG
from .entities import Body, Ship, make_asteroid, make_mineral, make_planet
from .ship import Intents, ShipController
from .utils import clamp, rand, seed_everything

EVENT_KEYS = ("collected", "refuel", "crash", "asteroid_crash", "out_of_fuel", "won")


@dataclass(frozen=True)
class Snapshot:
    """Read-only telemetry for one frame"""
    fuel_percent: int
    minerals_collected: int
    minerals_text: str
    ship_speed: float
    speed_text: str
    status_message: str
    game_over: bool
    game_won: bool
    elapsed_time: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class World:
    """Mission state machine"""

    def __init__(
        self,
        width: int = WORLD_CONFIG["width"],
        height: int = WORLD_CONFIG["height"],
        seed: Optional[int] = None,
        world_config: Optional[Dict[str, Any]] = None,
        ship_config: Optional[Dict[str, Any]] = None,
    ):
        self.cfg = dict(WORLD_CONFIG)
        self.cfg.update(world_config or {})
        assert width > 0 and height > 0, "Playfield must have a positive size."
        assert self.cfg["minerals_to_win"] <= self.cfg["n_minerals"], \
            "Mission target exceeds the number of minerals."

        self.width = width
        self.height = height
        self.minerals_to_win = self.cfg["minerals_to_win"]
        self.max_dt = self.cfg["max_dt"]

        self.controller = ShipController(ship_config or SHIP_CONFIG)

        # World state
        self.planets: List[Body] = []
        self.asteroids: List[Body] = []
        self.minerals: List[Body] = []
        self.ship: Ship = None  # type: ignore
        self.collected = 0
        self.game_over = False
        self.game_won = False
        self.elapsed_time = 0.0
        self.message = ""

        # Event counters for the current step
        self.events: Dict[str, int] = {}

        self.reset(seed=seed)

    # ----------------------------
    # Mission lifecycle
    # ----------------------------

    def reset(self, seed: Optional[int] = None):
        """Start a fresh mission"""
        seed_everything(seed)
        self._clear_events()

        self.planets = self._spawn_planets()
        self.asteroids = self._spawn_asteroids()
        self.minerals = self._spawn_minerals()

        self.ship = self.controller.spawn(self.width / 2, self.height / 2)
        self.collected = 0
        self.game_over = False
        self.game_won = False
        self.elapsed_time = 0.0
        self.message = MESSAGES["start"].format(target=self.minerals_to_win)

    def step(self, dt: float, intents: Optional[Intents] = None) -> Snapshot:
        """Advance the mission by one frame and return its telemetry"""
        intents = intents or Intents()
        if intents.reset:
            self.reset()
            return self.snapshot()

        self._clear_events()
        dt = clamp(dt, 0.0, self.max_dt)
        self.elapsed_time += dt

        self.controller.update(self.ship, intents, dt, self)

        # Minerals only move under the tractor beam
        for body in self.planets + self.asteroids:
            body.update(dt, self.width, self.height, self.cfg["wrap_margin"], self.cfg["frame_scale"])

        return self.snapshot()

    @property
    def active(self) -> bool:
        return not (self.game_over or self.game_won)

    def snapshot(self) -> Snapshot:
        speed = self.ship.speed
        return Snapshot(
            fuel_percent=int(math.floor(self.ship.fuel)),
            minerals_collected=self.collected,
            minerals_text=f"{self.collected} / {self.minerals_to_win}",
            ship_speed=speed,
            speed_text=f"{speed:.2f}",
            status_message=self.message,
            game_over=self.game_over,
            game_won=self.game_won,
            elapsed_time=self.elapsed_time,
        )

    def uncollected(self) -> List[Body]:
        return [m for m in self.minerals if not m.collected]

    # ----------------------------
    # Spawning
    # ----------------------------

    def _spawn_planets(self) -> List[Body]:
        cfg = self.cfg
        inset = cfg["planet_inset"]
        planets = []
        for i in range(cfg["n_planets"]):
            planets.append(make_planet(
                rand(inset, self.width - inset),
                rand(inset, self.height - inset),
                rand(*cfg["planet_radius"]),
                rand(*cfg["planet_hue"]),
                name=PLANET_NAMES[i % len(PLANET_NAMES)],
            ))
        return planets

    def _spawn_asteroids(self) -> List[Body]:
        return [
            make_asteroid(
                rand(0, self.width),
                rand(0, self.height),
                rand(*self.cfg["asteroid_radius"]),
                self.cfg,
            )
            for _ in range(self.cfg["n_asteroids"])
        ]

    def _spawn_minerals(self) -> List[Body]:
        """Scatter minerals in a ring around a random planet or asteroid"""
        cfg = self.cfg
        minerals = []
        for _ in range(cfg["n_minerals"]):
            use_planet = random.random() < cfg["mineral_planet_chance"]
            pool = self.planets if (use_planet and self.planets) or not self.asteroids else self.asteroids
            if not pool:
                minerals.append(make_mineral(rand(0, self.width), rand(0, self.height), cfg["mineral_radius"]))
                continue
            anchor = pool[int(rand(0, len(pool)))]
            angle = rand(0, math.pi * 2)
            dist = anchor.radius + rand(*cfg["mineral_offset"])
            minerals.append(make_mineral(
                anchor.pos.x + math.cos(angle) * dist,
                anchor.pos.y + math.sin(angle) * dist,
                cfg["mineral_radius"],
            ))
        return minerals

    def _clear_events(self):
        self.events = {k: 0 for k in EVENT_KEYS}
