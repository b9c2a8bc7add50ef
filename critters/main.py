"""Entry point for the critter simulation."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pydantic import ValidationError

from critters.config import SimulationConfig
from critters.errors import CritterError
from critters.simulation.renderer import Renderer
from critters.simulation.world import World

logger = logging.getLogger(__name__)


def _parse_species(values: list[str]) -> dict[str, int]:
    """Turn ["Bear=30", "Tiger=10"] into {"Bear": 30, "Tiger": 10}."""
    counts: dict[str, int] = {}
    for value in values:
        name, sep, count = value.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"Expected NAME=COUNT, got '{value}'")
        try:
            counts[name] = int(count)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Count for {name} must be an integer") from None
    return counts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="critters",
        description="Run a critter ecology in the terminal.",
    )
    parser.add_argument("--width", type=int, help="Grid columns")
    parser.add_argument("--height", type=int, help="Grid rows")
    parser.add_argument("--ticks", type=int, help="Number of steps to run")
    parser.add_argument("--delay", type=float, help="Seconds between frames")
    parser.add_argument(
        "--block",
        type=int,
        metavar="N",
        help="Advance to the next multiple of N steps per frame (e.g. 100)",
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--species",
        action="append",
        default=[],
        metavar="NAME=COUNT",
        help="Critters to seed; repeatable (default: 30 of each built-in)",
    )
    parser.add_argument("--debug", action="store_true", help="Show facing instead of glyphs")
    parser.add_argument("--headless", action="store_true", help="No rendering, summary only")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Start from env-derived settings and apply CLI overrides."""
    overrides: dict = {}
    if args.width is not None:
        overrides["world_width"] = args.width
    if args.height is not None:
        overrides["world_height"] = args.height
    if args.ticks is not None:
        overrides["max_ticks"] = args.ticks
    if args.delay is not None:
        overrides["tick_delay"] = args.delay
    if args.block is not None:
        overrides["block_size"] = args.block
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.species:
        overrides["species_counts"] = _parse_species(args.species)
    if args.debug:
        overrides["debug_mode"] = True
    return SimulationConfig(**overrides)


def run(config: SimulationConfig, headless: bool = False, renderer: Renderer | None = None) -> int:
    """Build a world from config, run it, and return a process exit code."""
    renderer = renderer or Renderer()
    with World(config.world_width, config.world_height, config=config) as world:
        for name, count in config.species_counts.items():
            world.add_species(count, name)

        if world.total() == 0:
            print("Nothing to simulate - no critters")
            return 1

        try:
            # A final block may overshoot max_ticks to reach its boundary.
            while world.tick_number < config.max_ticks:
                records = world.advance_to_multiple(config.block_size)
                if not headless:
                    renderer.print_frame(world, records[-1])
                    time.sleep(config.tick_delay)
        except KeyboardInterrupt:
            print(f"\n  Stopped at step {world.tick_number}")

        renderer.print_summary(world)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the simulation."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = build_config(args)
        return run(config, headless=args.headless)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        parser.error(str(e))
    except CritterError as e:
        logger.error(f"Simulation aborted: {e}", exc_info=True)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
