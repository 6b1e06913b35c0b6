"""Recognise digits shown on a seven-segment display."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from mlpnet.network import ActivationType, MultilayerPerceptron

SEGMENTS = 7

# Segments a..g lit for each digit 0..9.
DIGIT_PATTERNS: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 0),
    (0, 1, 1, 0, 0, 0, 0),
    (1, 1, 0, 1, 1, 0, 1),
    (1, 1, 1, 1, 0, 0, 1),
    (0, 1, 1, 0, 0, 1, 1),
    (1, 0, 1, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1),
)

PROMPT = 'Input pattern "a b c d e f g": '


def parse_pattern(line: str) -> list[float]:
    """Read numbers separated by whitespace, stopping at the first non-number."""
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def read_pattern(lines: Iterable[str], out: TextIO | None = None) -> list[float] | None:
    """Prompt until a line holds seven numbers and return them.

    Returns ``None`` when a line starts with a negative number or input runs out.
    """
    out = out if out is not None else sys.stdout
    for line in lines:
        print(PROMPT, end="", file=out)
        values = parse_pattern(line)
        if values and values[0] < 0.0:
            return None
        if len(values) == SEGMENTS:
            return values
        print(
            "Error: Input must contain exactly 7 floating point values separated by spaces.",
            file=out,
        )
    return None


def _one_hot(digit: int) -> list[float]:
    return [1.0 if i == digit else 0.0 for i in range(len(DIGIT_PATTERNS))]


class SegmentRecognizer:
    """Three networks that read a seven-segment pattern in different ways.

    ``single`` maps a pattern to one value near (digit + 0.5) / 10,
    ``one_hot`` to ten outputs of which the digit's is highest, and
    ``segments`` reproduces the pattern itself.
    """

    def __init__(
        self,
        activation: ActivationType | int = ActivationType.SIGMOID,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        kind = ActivationType(activation)
        self.single = MultilayerPerceptron([7, 7, 1], kind, rng=rng)
        self.one_hot = MultilayerPerceptron([7, 7, 10], kind, rng=rng)
        self.segments = MultilayerPerceptron([7, 7, 7], kind, rng=rng)

    def _train_one(self, mlp: MultilayerPerceptron, targets: list[list[float]], epochs: int) -> float:
        mse = 0.0
        for _ in range(epochs):
            mse = sum(
                mlp.back_propagation(pattern, target)
                for pattern, target in zip(DIGIT_PATTERNS, targets)
            )
        return mse / len(DIGIT_PATTERNS)

    def train(self, epochs: int) -> tuple[float, float, float]:
        """Train all three networks; return each one's mean MSE over the last epoch."""
        if epochs < 0:
            raise ValueError("epochs must not be negative")
        single_targets = [[digit / 10 + 0.05] for digit in range(len(DIGIT_PATTERNS))]
        one_hot_targets = [_one_hot(digit) for digit in range(len(DIGIT_PATTERNS))]
        segment_targets = [[float(s) for s in p] for p in DIGIT_PATTERNS]
        return (
            self._train_one(self.single, single_targets, epochs),
            self._train_one(self.one_hot, one_hot_targets, epochs),
            self._train_one(self.segments, segment_targets, epochs),
        )

    def classify(self, pattern: Sequence[float]) -> tuple[int, int, list[int]]:
        """Return the single-output digit, the one-hot digit and the rounded segments."""
        if len(pattern) != SEGMENTS:
            raise ValueError(f"a pattern has {SEGMENTS} segments, got {len(pattern)}")
        single_digit = int(self.single.run(pattern)[0] * 10)
        scores = self.one_hot.run(pattern)
        one_hot_digit = max(range(len(scores)), key=scores.__getitem__)
        segments = [int(v + 0.5) for v in self.segments.run(pattern)]
        return single_digit, one_hot_digit, segments


_ACTIVATION_CHOICES = {
    0: ("SIGMOID", ActivationType.SIGMOID),
    1: ("TANH", ActivationType.TANH),
    2: ("RELU", ActivationType.RELU),
}


def _leading_int(text: str) -> int | None:
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Train the recognisers, then classify patterns read from standard input."""
    parser = argparse.ArgumentParser(description="Seven-segment digit recognition.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    out = sys.stdout
    lines: Iterator[str] = (line.rstrip("\n") for line in sys.stdin)

    print(
        "-------------------------------- Segment Display Recognition System"
        " --------------------------------",
        file=out,
    )
    print("How many epochs?: ", end="", file=out)
    epochs = _leading_int(next(lines, ""))
    if epochs is None or epochs < 0:
        print("\nError: the number of epochs must be a non-negative integer.", file=out)
        return 1

    print("Activation type? (0: SIGMOID, 1: TANH, 2: RELU): ", end="", file=out)
    choice = _leading_int(next(lines, ""))
    if choice in _ACTIVATION_CHOICES:
        name, kind = _ACTIVATION_CHOICES[choice]
        print(f"{name} selected", file=out)
    else:
        print("Invalid selection; defaulting to SIGMOID", file=out)
        kind = ActivationType.SIGMOID

    recognizer = SegmentRecognizer(kind, random.Random(args.seed))
    single_mse, one_hot_mse, segments_mse = recognizer.train(epochs)
    print(f"7 to 1 Network MSE: {single_mse:g}", file=out)
    print(f"7 to 10 Network MSE: {one_hot_mse:g}", file=out)
    print(f"7 to 7 Network MSE: {segments_mse:g}", file=out)

    while (pattern := read_pattern(lines, out)) is not None:
        single_digit, one_hot_digit, segments = recognizer.classify(pattern)
        print(f"The output for above sample by 7 to 1 Network is {single_digit}", file=out)
        print(f"The output for above sample by 7 to 10 Network is {one_hot_digit}", file=out)
        shown = "".join(f" {s}" for s in segments)
        print(f"The output for above sample by 7 to 7 Network is [{shown} ]\n", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())