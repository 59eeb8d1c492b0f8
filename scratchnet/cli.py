"""Command that trains a small network for one step and saves it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from .network import NeuralNetwork


def main(argv: Sequence[str] | None = None) -> int:
    """Build a 2-3-1 network, run one training step and save the model."""
    parser = argparse.ArgumentParser(
        description="Train a 2-3-1 network on one example and save the model."
    )
    parser.add_argument(
        "-o", "--output", default="model.nn", help="model file to write (default: model.nn)"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the initial weights")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    net = NeuralNetwork([2, 3, 1], 0.1, rng)
    net.set_input([0.5, 0.8])
    net.feed_forward()
    net.set_target([0.1])
    net.back_propagate()
    net.save(args.output)

    print("Model saved successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())