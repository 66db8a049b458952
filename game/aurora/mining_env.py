"""
MiningEnv - the AURORA mining mission as a Gymnasium environment
----------------------------------------------------------------
- Wraps one World; the world owns all rules, this class only maps
  actions -> intents and world events -> reward
- Discrete MultiDiscrete action space: [rotate(3), thrust(2), tractor(2)]
- Vector observation: ship state + K nearest minerals + M nearest planets
  + N nearest asteroids
- Episode ends when the mission is won or lost

Install:
    pip install gymnasium numpy arcade

Quick test:
    python -m game.aurora.mining_env
"""

from __future__ import annotations

import math
import time
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, REWARD_CONFIG, WORLD_CONFIG
from .entities import Body
from .ship import Intents
from .utils import clamp
from .world import World


class MiningEnv(gym.Env):
    """Gymnasium wrapper around the mission World"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = WORLD_CONFIG["width"],
        height: int = WORLD_CONFIG["height"],
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_minerals: int = ENV_CONFIG["k_minerals"],
        m_planets: int = ENV_CONFIG["m_planets"],
        n_asteroids: int = ENV_CONFIG["n_asteroids"],
        speed_scale: float = ENV_CONFIG["speed_scale"],
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps

        self.k_minerals = k_minerals
        self.m_planets = m_planets
        self.n_asteroids = n_asteroids
        self.speed_scale = speed_scale

        self.rewards = dict(REWARD_CONFIG)
        self.rewards.update(reward_config or {})

        # rotate: 0 none, 1 left, 2 right; thrust: 0/1; tractor: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2, 2])

        # Ship: pos(2) vel(2) heading(2) fuel(1) tractor(1)
        # Each mineral: rel pos(2); each planet: rel pos(2) radius(1); each asteroid: rel pos(2)
        obs_dim = 8 + self.k_minerals * 2 + self.m_planets * 3 + self.n_asteroids * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.world = World(width=width, height=height)
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        self.world.reset(seed=seed)
        self._step_count = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        rotate, thrust, tractor = int(action[0]), int(action[1]), int(action[2])
        intents = Intents(
            rotate_left=rotate == 1,
            rotate_right=rotate == 2,
            thrust=bool(thrust),
            tractor=bool(tractor),
        )

        self.world.step(self.dt, intents)

        reward = self._compute_reward()
        terminated = not self.world.active
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _nearest(self, bodies: List[Body], count: int) -> List[Body]:
        sp = self.world.ship.pos
        return sorted(bodies, key=lambda b: (b.pos.x - sp.x) ** 2 + (b.pos.y - sp.y) ** 2)[:count]

    def _rel(self, body: Body) -> List[float]:
        sp = self.world.ship.pos
        dx = (body.pos.x - sp.x) / self.width
        dy = (body.pos.y - sp.y) / self.height
        return [clamp(dx, -1, 1), clamp(dy, -1, 1)]

    def _get_obs(self) -> np.ndarray:
        ship = self.world.ship
        fuel_frac = ship.fuel / self.world.controller.cfg["max_fuel"]

        obs_parts = [
            (ship.pos.x / self.width) * 2 - 1,
            (ship.pos.y / self.height) * 2 - 1,
            clamp(ship.vel.x / self.speed_scale, -1, 1),
            clamp(ship.vel.y / self.speed_scale, -1, 1),
            math.cos(ship.angle),
            math.sin(ship.angle),
            fuel_frac * 2 - 1,
            1.0 if ship.tractor_active else 0.0,
        ]

        minerals = self._nearest(self.world.uncollected(), self.k_minerals)
        for i in range(self.k_minerals):
            obs_parts += self._rel(minerals[i]) if i < len(minerals) else [0.0, 0.0]

        planets = self._nearest(self.world.planets, self.m_planets)
        for i in range(self.m_planets):
            if i < len(planets):
                obs_parts += self._rel(planets[i]) + [clamp(planets[i].radius / 100.0, 0, 1)]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        asteroids = self._nearest(self.world.asteroids, self.n_asteroids)
        for i in range(self.n_asteroids):
            obs_parts += self._rel(asteroids[i]) if i < len(asteroids) else [0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _compute_reward(self) -> float:
        r = self.rewards
        ev = self.world.events

        reward = 0.0
        reward += r["R_MINERAL"] * ev["collected"]
        reward += r["R_REFUEL"] * ev["refuel"]
        reward += r["R_WIN"] * ev["won"]
        reward -= r["R_CRASH"] * (ev["crash"] + ev["asteroid_crash"])
        reward -= r["R_OUT_OF_FUEL"] * ev["out_of_fuel"]
        reward -= r["R_TIME"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        info = self.world.snapshot().to_dict()
        info["step"] = self._step_count
        info["events"] = dict(self.world.events)
        return info

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import MiningWindow
            self._window = MiningWindow(self.world, interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = MiningEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print(f"Running episode... {info['status_message']}")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"{info['status_message']}")
    print(f"Random episode return: {total:.3f}  "
          f"minerals: {info['minerals_text']}  fuel: {info['fuel_percent']}%  "
          f"steps: {info['step']}")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
