"""
Mission configuration for the AURORA mining game
Tunables for the world, the ship controller and the agent environment
"""

import math

# Playfield and mission layout
WORLD_CONFIG = {
    "width": 1280,
    "height": 720,
    "n_planets": 5,
    "n_asteroids": 15,
    "n_minerals": 25,
    "minerals_to_win": 10,
    "max_dt": 0.05,          # seconds; longer frames are clamped
    "wrap_margin": 100.0,    # padding around the viewport for ambient bodies
    "frame_scale": 60.0,     # body velocities are in units per 60fps tick
    # Spawn ranges
    "planet_inset": 200.0,
    "planet_radius": (50.0, 90.0),
    "planet_hue": (180.0, 280.0),
    "asteroid_radius": (12.0, 28.0),
    "asteroid_drift": (-0.3, 0.3),
    "asteroid_points": 8,
    "asteroid_jitter": (0.7, 1.0),
    "mineral_radius": 6.0,
    "mineral_planet_chance": 0.6,
    "mineral_offset": (15.0, 80.0),
}

# Ship controller
SHIP_CONFIG = {
    "max_fuel": 100.0,
    "initial_angle": -math.pi / 2,  # facing "up" the screen
    "turn_rate": 4.0,               # rad/s
    "thrust": 150.0,                # units/s^2
    "thrust_burn": 15.0,            # fuel/s
    "tractor_burn": 10.0,           # fuel/s
    "tractor_min_fuel": 5.0,
    "tractor_range": 150.0,
    "tractor_dead_zone": 1.0,
    "tractor_speed": 200.0,         # units/s
    "planet_margin": 12.0,
    "landing_push_out": 13.0,
    "planet_crash_speed": 60.0,
    "landing_refuel": 30.0,
    "landing_damping": 0.3,
    "asteroid_margin": 10.0,
    "asteroid_crash_speed": 50.0,
    "collect_range": 15.0,
}

PLANET_NAMES = ["Kepler-442b", "Proxima-b", "TRAPPIST-1e", "HD 40307g", "Gliese 667Cc"]

# Status message catalog
MESSAGES = {
    "start": "Collect {target} minerals to complete mission!",
    "crash": "Crashed into {name}! Press R to retry.",
    "refuel": "Refueled at {name}!",
    "asteroid": "Asteroid collision! Press R to retry.",
    "collected": "Mineral collected! ({count}/{target})",
    "won": "Mission complete! All minerals collected! Press R for new mission.",
    "out_of_fuel": "Out of fuel! Press R to retry.",
}

# ==============================================================================
# AGENT ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "dt": 1 / 30,
    "max_steps": 3600,  # 120 seconds at 30 FPS
    "k_minerals": 5,
    "m_planets": 2,
    "n_asteroids": 3,
    "speed_scale": 150.0,  # velocity normalization for observations
}

REWARD_CONFIG = {
    "R_MINERAL": 1.0,     # per mineral collected
    "R_REFUEL": 0.1,      # per soft landing
    "R_WIN": 5.0,         # mission complete
    "R_CRASH": 5.0,       # planet or asteroid crash
    "R_OUT_OF_FUEL": 3.0,
    "R_TIME": 0.001,      # small time penalty
}
