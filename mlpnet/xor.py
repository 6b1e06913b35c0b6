"""Train multilayer perceptrons to act as an XOR gate."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from mlpnet.network import ActivationType, MultilayerPerceptron

XOR_SAMPLES: tuple[tuple[tuple[float, float], int], ...] = (
    ((0.0, 0.0), 0),
    ((0.0, 1.0), 1),
    ((1.0, 0.0), 1),
    ((1.0, 1.0), 0),
)

EARLY_STOP_MSE = 0.01
REPORT_EVERY = 500


def threshold(x: float) -> int:
    """Turn a continuous output into a binary one."""
    return int(x >= 0.5)


@dataclass(frozen=True)
class XorReport:
    """What one XOR training run achieved."""

    final_mse: float
    best_mse: float
    epochs_run: int
    outputs: tuple[float, float, float, float]
    correct: int

    @property
    def accuracy(self) -> float:
        """Share of the four cases answered correctly, in percent."""
        return self.correct * 100.0 / len(XOR_SAMPLES)


def train_xor(
    mlp: MultilayerPerceptron,
    activation_name: str,
    epochs: int = 3000,
    out: TextIO | None = None,
) -> XorReport:
    """Train ``mlp`` on the XOR truth table, report progress and results."""
    if epochs < 1:
        raise ValueError("epochs must be at least 1")
    out = out if out is not None else sys.stdout
    print(
        f"Training the Neural Network as an XOR Gate using {activation_name}...",
        file=out,
    )

    mse = 0.0
    best_mse = 1.0
    epochs_run = 0
    for epoch in range(epochs):
        epochs_run = epoch + 1
        mse = sum(mlp.back_propagation(x, [y]) for x, y in XOR_SAMPLES)
        mse /= len(XOR_SAMPLES)
        best_mse = min(best_mse, mse)

        if epoch % REPORT_EVERY == 0 or epoch == epochs - 1:
            print(f"Epoch {epoch} - MSE = {mse:g}", file=out)

        if mse < EARLY_STOP_MSE:
            print(f"Early stopping at epoch {epoch} with MSE = {mse:g}", file=out)
            break

    print(f"\nFinal MSE: {mse:g} (Best: {best_mse:g})", file=out)
    print("Trained Weights:", end="", file=out)
    mlp.print_weights(out)

    print(f"XOR Results with {activation_name}:", file=out)
    outputs = tuple(mlp.run(x)[0] for x, _ in XOR_SAMPLES)
    correct = 0
    for (x, expected), value in zip(XOR_SAMPLES, outputs):
        binary = threshold(value)
        correct += binary == expected
        print(
            f"Input: {int(x[0])},{int(x[1])} | Output: {value:.6f} | "
            f"Binary: {binary} | Expected: {expected}",
            file=out,
        )

    report = XorReport(mse, best_mse, epochs_run, outputs, correct)
    print(f"Accuracy: {report.accuracy:.6f}%", file=out)
    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Train XOR networks with sigmoid, tanh and ReLU activations."""
    parser = argparse.ArgumentParser(description="Train XOR networks.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    runs = (
        ("Sigmoid", ActivationType.SIGMOID, [2, 4, 1], 0.1, 3000),
        ("Tanh", ActivationType.TANH, [2, 4, 1], 0.1, 3000),
        # ReLU needs more neurons, a smaller learning rate and more epochs.
        ("ReLU", ActivationType.RELU, [2, 6, 1], 0.01, 10000),
    )
    for name, kind, layers, eta, epochs in runs:
        print(
            f"\n\n ------------------------- Trained XOR Example with {name}"
            " ------------------------- \n"
        )
        mlp = MultilayerPerceptron(layers, kind, 1.0, eta, rng)
        train_xor(mlp, name, epochs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())