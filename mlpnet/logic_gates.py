"""Logic gates built from perceptrons with hand-set weights."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Sequence

from mlpnet.network import MultilayerPerceptron, Perceptron

# Two input weights and one bias weight per gate.
AND_WEIGHTS = (10.0, 10.0, -15.0)
OR_WEIGHTS = (15.0, 15.0, -10.0)
NOR_WEIGHTS = (-15.0, -15.0, 10.0)
NAND_WEIGHTS = (-10.0, -10.0, 15.0)

GATE_INPUTS = ((0, 0), (0, 1), (1, 0), (1, 1))


def build_and_perceptron() -> Perceptron:
    """A two-input perceptron behaving as an AND gate."""
    perceptron = Perceptron(2)
    perceptron.set_weights(AND_WEIGHTS)
    return perceptron


def build_xor_network() -> MultilayerPerceptron:
    """A 2-2-1 network computing XOR as AND(NAND, OR)."""
    mlp = MultilayerPerceptron([2, 2, 1], rng=random.Random(0))
    mlp.set_weights([[NAND_WEIGHTS, OR_WEIGHTS], [AND_WEIGHTS]])
    return mlp


def _round(x: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def main(argv: Sequence[str] | None = None) -> int:
    """Show an AND perceptron and an XOR network at work."""
    argparse.ArgumentParser(description="Logic gates from perceptrons.").parse_args(argv)
    out = sys.stdout

    print("\n\n ------------ logic Gate Tester ------------ \n", file=out)
    gate = build_and_perceptron()
    print("AND Gate: ", file=out)
    for x in GATE_INPUTS:
        print(f"{gate.run(x):g}", file=out)

    print("\n\n ------------ logic Gate XOR using Multilayer Perceptrons ------------ \n", file=out)
    mlp = build_xor_network()
    print("Hardcoded weights are :", file=out)
    mlp.print_weights(out)
    print("XOR:", file=out)
    for a, b in GATE_INPUTS:
        value = mlp.run([a, b])[0]
        print(f"{a} {b} = {value:g} Rounded Value: {_round(value):g}", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())