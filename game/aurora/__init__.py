"""AURORA mining mission - 2D ship/planet/mineral simulation"""

from .vector import Vector2
from .entities import Body, Ship
from .ship import Intents, ShipController
from .world import Snapshot, World
from .mining_env import MiningEnv, run_random_episode

__all__ = [
    'Vector2', 'Body', 'Ship', 'Intents', 'ShipController',
    'Snapshot', 'World', 'MiningEnv', 'run_random_episode',
]
