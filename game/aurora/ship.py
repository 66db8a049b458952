"""
Ship controller - turns logical intents into motion and applies the mission rules
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Dict, Mapping

from .config import MESSAGES, SHIP_CONFIG
from .entities import Ship
from .utils import wrap_tight
from .vector import Vector2

if TYPE_CHECKING:
    from .world import World


@dataclass(frozen=True)
class Intents:
    """Logical input sampled once per step"""
    rotate_left: bool = False
    rotate_right: bool = False
    thrust: bool = False
    tractor: bool = False
    reset: bool = False

    @classmethod
    def from_mapping(cls, keys: Mapping[str, Any]) -> Intents:
        """Build from a dict of intent name -> truthy; unknown names are ignored"""
        return cls(**{f.name: bool(keys.get(f.name, False)) for f in fields(cls)})


class ShipController:
    """
    Per-frame ship update. The world is passed in on every call and never
    stored, so the world is the only owner of the entity collections.
    """

    def __init__(self, config: Dict[str, Any] = SHIP_CONFIG):
        self.cfg = dict(SHIP_CONFIG)
        self.cfg.update(config)

    def spawn(self, x: float, y: float) -> Ship:
        return Ship(pos=Vector2(x, y), angle=self.cfg["initial_angle"], fuel=self.cfg["max_fuel"])

    def update(self, ship: Ship, intents: Intents, dt: float, world: World):
        if not ship.alive:
            return

        cfg = self.cfg

        # Rotation
        if intents.rotate_left:
            ship.angle -= cfg["turn_rate"] * dt
        if intents.rotate_right:
            ship.angle += cfg["turn_rate"] * dt

        # Thrust
        ship.thrusting = intents.thrust and ship.fuel > 0
        if ship.thrusting:
            ship.vel = ship.vel.add(Vector2.from_angle(ship.angle, cfg["thrust"] * dt))
            ship.fuel = max(0.0, ship.fuel - cfg["thrust_burn"] * dt)

        # Integrate
        ship.pos = wrap_tight(ship.pos.add(ship.vel.scale(dt)), world.width, world.height)

        self._tractor(ship, intents, dt, world)

        speed = ship.speed
        self._planet_contacts(ship, speed, world)
        self._asteroid_contacts(ship, speed, world)
        self._collect_minerals(ship, world)

        # Fuel exhaustion
        if ship.fuel <= 0 and not world.game_won:
            self._crash(ship, world, MESSAGES["out_of_fuel"])
            world.events["out_of_fuel"] += 1

    # ----------------------------
    # Rules
    # ----------------------------

    def _tractor(self, ship: Ship, intents: Intents, dt: float, world: World):
        cfg = self.cfg
        ship.tractor_active = intents.tractor and ship.fuel > cfg["tractor_min_fuel"]
        if not ship.tractor_active:
            return

        ship.fuel = max(0.0, ship.fuel - cfg["tractor_burn"] * dt)
        pull = cfg["tractor_speed"] * dt
        for m in world.minerals:
            if m.collected:
                continue
            diff = ship.pos.sub(m.pos)
            dist = diff.magnitude()
            # inside the dead zone the direction is unreliable
            if cfg["tractor_dead_zone"] < dist < cfg["tractor_range"]:
                m.pos = m.pos.add(diff.normalize().scale(min(pull, dist)))

    def _planet_contacts(self, ship: Ship, speed: float, world: World):
        """Every planet in range is evaluated, in list order; last message wins"""
        cfg = self.cfg
        for p in world.planets:
            diff = ship.pos.sub(p.pos)
            if diff.magnitude() >= p.radius + cfg["planet_margin"]:
                continue
            if speed > cfg["planet_crash_speed"]:
                self._crash(ship, world, MESSAGES["crash"].format(name=p.name))
                world.events["crash"] += 1
            else:
                ship.fuel = min(cfg["max_fuel"], ship.fuel + cfg["landing_refuel"])
                ship.vel = ship.vel.scale(cfg["landing_damping"])
                pushed = p.pos.add(diff.normalize().scale(p.radius + cfg["landing_push_out"]))
                ship.pos = wrap_tight(pushed, world.width, world.height)
                world.message = MESSAGES["refuel"].format(name=p.name)
                world.events["refuel"] += 1

    def _asteroid_contacts(self, ship: Ship, speed: float, world: World):
        cfg = self.cfg
        for a in world.asteroids:
            dist = ship.pos.distance_to(a.pos)
            if dist < a.radius + cfg["asteroid_margin"] and speed > cfg["asteroid_crash_speed"]:
                self._crash(ship, world, MESSAGES["asteroid"])
                world.events["asteroid_crash"] += 1

    def _collect_minerals(self, ship: Ship, world: World):
        target = world.minerals_to_win
        for m in world.minerals:
            if m.collected:
                continue
            if ship.pos.distance_to(m.pos) >= self.cfg["collect_range"]:
                continue
            m.collected = True
            world.collected += 1
            world.message = MESSAGES["collected"].format(count=world.collected, target=target)
            world.events["collected"] += 1
            if world.collected >= target and not world.game_over:
                self._freeze(ship)
                world.game_won = True
                world.message = MESSAGES["won"]
                world.events["won"] += 1
                break

    @staticmethod
    def _freeze(ship: Ship):
        ship.alive = False
        ship.tractor_active = False
        ship.thrusting = False

    def _crash(self, ship: Ship, world: World, message: str):
        self._freeze(ship)
        world.game_over = True
        world.message = message
