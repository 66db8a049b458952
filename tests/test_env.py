import unittest

import numpy as np

from game.aurora.entities import make_mineral
from game.aurora.mining_env import MiningEnv


class TestMiningEnv(unittest.TestCase):
    def setUp(self):
        self.env = MiningEnv(width=800, height=600, max_steps=5)

    def tearDown(self):
        self.env.close()

    def test_spaces(self):
        self.assertEqual(list(self.env.action_space.nvec), [3, 2, 2])
        self.assertEqual(self.env.observation_space.shape, (8 + 5 * 2 + 2 * 3 + 3 * 2,))

    def test_reset_observation(self):
        obs, info = self.env.reset(seed=0)
        self.assertEqual(obs.dtype, np.float32)
        self.assertTrue(self.env.observation_space.contains(obs))
        self.assertEqual(info["fuel_percent"], 100)
        self.assertEqual(info["minerals_text"], "0 / 10")
        self.assertEqual(info["step"], 0)

    def test_step_contract(self):
        self.env.reset(seed=1)
        self.env.action_space.seed(1)
        for _ in range(5):
            obs, reward, terminated, truncated, info = self.env.step(self.env.action_space.sample())
            self.assertTrue(self.env.observation_space.contains(obs))
            self.assertIsInstance(reward, float)
            self.assertIn("status_message", info)
            if terminated:
                break

    def test_truncates_at_max_steps(self):
        self.env.reset(seed=2)
        w = self.env.world
        w.planets, w.asteroids, w.minerals = [], [], []
        truncated = False
        for _ in range(5):
            _, _, terminated, truncated, _ = self.env.step([0, 0, 0])
            self.assertFalse(terminated)
        self.assertTrue(truncated)

    def test_collect_reward(self):
        self.env.reset(seed=3)
        w = self.env.world
        w.planets, w.asteroids = [], []
        w.minerals = [make_mineral(w.ship.pos.x, w.ship.pos.y)]
        _, reward, terminated, _, info = self.env.step([0, 0, 0])
        self.assertAlmostEqual(reward, 1.0 - 0.001)
        self.assertFalse(terminated)
        self.assertEqual(info["events"]["collected"], 1)

    def test_out_of_fuel_terminates(self):
        self.env.reset(seed=4)
        w = self.env.world
        w.planets, w.asteroids, w.minerals = [], [], []
        w.ship.fuel = 0.0
        _, reward, terminated, _, info = self.env.step([0, 1, 0])
        self.assertTrue(terminated)
        self.assertTrue(info["game_over"])
        self.assertLess(reward, 0.0)


if __name__ == '__main__':
    unittest.main()
