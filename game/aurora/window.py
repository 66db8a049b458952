"""
Arcade window that presents a World and feeds it keyboard intents.
Holds no game rules: everything it shows comes from the world and its snapshot.
"""

import colorsys
import math

import arcade

from .config import WORLD_CONFIG
from .ship import Intents
from .vector import Vector2
from .world import World

KEY_INTENTS = {
    arcade.key.LEFT: "rotate_left",
    arcade.key.RIGHT: "rotate_right",
    arcade.key.UP: "thrust",
    arcade.key.SPACE: "tractor",
    arcade.key.R: "reset",
}


def hue_to_rgb(hue: float, lightness: float = 0.45, saturation: float = 0.6):
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return int(r * 255), int(g * 255), int(b * 255)


class MiningWindow(arcade.Window):
    """Arcade window for the mining mission"""

    def __init__(self, world: World, interactive: bool = True, title: str = "AURORA Mission"):
        super().__init__(world.width, world.height, title)
        self.world = world
        self.interactive = interactive
        self.keys = {}

        # Colors
        self.BG = (0, 0, 0)
        self.SHIP_C = (221, 221, 221)
        self.ASTEROID_C = (85, 85, 85)
        self.MINERAL_C = (0, 255, 255)
        self.TRACTOR_C = (100, 200, 255, 60)
        self.HUD_C = (220, 220, 220)
        self.background_color = self.BG

    def _y(self, y: float) -> float:
        # world y grows down the screen, arcade y grows up
        return self.world.height - y

    # ----------------------------
    # Input / clock
    # ----------------------------

    def on_key_press(self, key, modifiers):
        if key in KEY_INTENTS:
            self.keys[KEY_INTENTS[key]] = True

    def on_key_release(self, key, modifiers):
        if key in KEY_INTENTS:
            self.keys[KEY_INTENTS[key]] = False

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self.world.step(delta_time, Intents.from_mapping(self.keys))

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        w = self.world

        for p in w.planets:
            arcade.draw_circle_filled(p.pos.x, self._y(p.pos.y), p.radius, hue_to_rgb(p.hue))
            arcade.draw_circle_outline(p.pos.x, self._y(p.pos.y), p.radius + 3,
                                       hue_to_rgb(p.hue, 0.6, 0.7), 2)

        for a in w.asteroids:
            points = []
            n = len(a.silhouette)
            for i, jitter in enumerate(a.silhouette):
                ang = a.rotation + (i / n) * math.pi * 2
                points.append((a.pos.x + math.cos(ang) * a.radius * jitter,
                               self._y(a.pos.y + math.sin(ang) * a.radius * jitter)))
            arcade.draw_polygon_filled(points, self.ASTEROID_C)

        pulse_t = w.elapsed_time * 3
        for m in w.minerals:
            if m.collected:
                continue
            pulse = 0.8 + math.sin(pulse_t + m.pulse_phase) * 0.2
            arcade.draw_circle_filled(m.pos.x, self._y(m.pos.y), m.radius * pulse, self.MINERAL_C)

        ship = w.ship
        if ship.tractor_active:
            arcade.draw_circle_filled(ship.pos.x, self._y(ship.pos.y),
                                      w.controller.cfg["tractor_range"], self.TRACTOR_C)

        nose = ship.pos.add(Vector2.from_angle(ship.angle, 15))
        left = ship.pos.add(Vector2.from_angle(ship.angle + 2.5, 12))
        right = ship.pos.add(Vector2.from_angle(ship.angle - 2.5, 12))
        arcade.draw_polygon_filled(
            [(v.x, self._y(v.y)) for v in (nose, left, right)], self.SHIP_C
        )

        snap = w.snapshot()
        txt = (f"Fuel: {snap.fuel_percent}%  "
               f"Minerals: {snap.minerals_text}  "
               f"Velocity: {snap.speed_text}")
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)
        arcade.draw_text(snap.status_message, 12, 12, self.HUD_C, 14)


def play(width: int = WORLD_CONFIG["width"], height: int = WORLD_CONFIG["height"], seed=None):
    """Open an interactive window and run until it is closed"""
    window = MiningWindow(World(width=width, height=height, seed=seed))
    window.set_update_rate(1 / 60)
    arcade.run()
