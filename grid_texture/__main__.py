"""Command-line entry point: ``python -m grid_texture``.

Synthesizes one texture and writes it as ``img-<params>.png`` into the output
directory, printing the written path.
"""

import argparse
import logging
import sys
from typing import List, Optional

from grid_texture.config import SynthesisConfig, parse_seed
from grid_texture.logging_config import setup_logging
from grid_texture.renderer.texture import save_texture
from grid_texture.synthesize import synthesize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid_texture",
        description="Synthesize a 2**ROUNDS square texture by noisy subdivision and pixel exchange",
    )
    parser.add_argument("initial_noise", type=float, help="Noise stddev of the first round")
    parser.add_argument("final_noise", type=float, help="Noise stddev of the last round")
    parser.add_argument("rounds", type=int, help="Number of subdivision rounds")
    parser.add_argument("outerp", type=float, help="Exponent on squared neighbor distance")
    parser.add_argument("exchange_rate", type=int, help="Exchange trials per pixel in the last round")
    parser.add_argument("seed", type=parse_seed, help="Random seed in [0, 2**64)")
    parser.add_argument("-o", "--output-dir", default=".", help="Directory for the PNG (default: .)")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every exchange pass")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = SynthesisConfig(
            initial_noise=args.initial_noise,
            final_noise=args.final_noise,
            rounds=args.rounds,
            outerp=args.outerp,
            exchange_rate=args.exchange_rate,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    result = synthesize(config)
    try:
        path = save_texture(result, args.output_dir)
    except OSError as e:
        logger.error(f"Failed to write texture: {e}")
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
