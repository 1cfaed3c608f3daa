#!/usr/bin/env python3
"""
Rule 110 Terminal Demonstration

Runs the lattice engine from the single right-edge seed and prints one line
per generation ('#' alive, '.' dead).
"""

import sys
import os
import logging
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.rule110 import ConfigurationError, InvalidArgument, Rule110Engine, RuleParams, TextFrameRenderer
from src.rule110.lattice import ALIVE_CHAR, DEAD_CHAR, DEFAULT_SIZE

logger = logging.getLogger(__name__)


def run_demo(size=DEFAULT_SIZE, cycles=100, rule=110,
             alive_char=ALIVE_CHAR, dead_char=DEAD_CHAR, stream=None):
    """Run the engine with a text renderer and return summary metrics."""
    renderer = TextFrameRenderer(stream=stream, alive_char=alive_char, dead_char=dead_char)
    engine = Rule110Engine(size=size, observer=renderer, rule_params=RuleParams(rule))

    engine.run(cycles)

    results = {
        "size": size,
        "cycles": cycles,
        "rule": rule,
        "frames": renderer.frames_written,
        "final_alive": engine.lattice.count_alive(),
        "final_density": engine.lattice.density(),
    }
    logger.info(f"Frames written: {results['frames']}, final alive cells: {results['final_alive']}")
    return results


def create_parser():
    parser = argparse.ArgumentParser(description="Rule 110 cellular automaton")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Lattice length (>= 3)")
    parser.add_argument("--cycles", type=int, default=100, help="Generations after the seed")
    parser.add_argument("--rule", type=int, default=110, help="Elementary rule number (0-255)")
    parser.add_argument("--alive-char", default=ALIVE_CHAR, help="Character for alive cells")
    parser.add_argument("--dead-char", default=DEAD_CHAR, help="Character for dead cells")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv=None):
    args = create_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run_demo(
            size=args.size,
            cycles=args.cycles,
            rule=args.rule,
            alive_char=args.alive_char,
            dead_char=args.dead_char,
        )
    except (ConfigurationError, InvalidArgument) as e:
        logger.error(f"Run failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
