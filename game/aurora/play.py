"""
Command line entry point for the AURORA mining mission
"""

import argparse

from .config import WORLD_CONFIG


def main():
    parser = argparse.ArgumentParser(description="Play the AURORA mining mission")
    parser.add_argument(
        "--random",
        action="store_true",
        help="Let a random agent fly instead of opening the interactive window",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Disable rendering (only with --random)",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=1,
        help="Number of random-agent episodes",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the mission layout",
    )
    parser.add_argument("--width", type=int, default=WORLD_CONFIG["width"])
    parser.add_argument("--height", type=int, default=WORLD_CONFIG["height"])
    args = parser.parse_args()

    if args.random:
        from .mining_env import run_random_episode

        returns = []
        for ep in range(args.episodes):
            seed = None if args.seed is None else args.seed + ep
            returns.append(run_random_episode(render=not args.headless, seed=seed))
        if len(returns) > 1:
            print(f"Mean return over {len(returns)} episodes: {sum(returns) / len(returns):.3f}")
        return

    from .window import play
    play(width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
