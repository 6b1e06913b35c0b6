"""Multilayer perceptrons with backpropagation, and XOR, logic-gate and seven-segment demos."""

__version__ = "0.1.0"
__all__ = ["network", "xor", "segdisplay", "logic_gates"]