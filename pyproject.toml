[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "mlpnet"
version = "0.1.0"
description = "A small multilayer perceptron with backpropagation, plus XOR, logic-gate and seven-segment display demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural-network", "perceptron", "backpropagation", "xor", "machine-learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mlpnet-xor = "mlpnet.xor:main"
mlpnet-segdisplay = "mlpnet.segdisplay:main"
mlpnet-logic-gates = "mlpnet.logic_gates:main"

[tool.setuptools.packages.find]
include = ["mlpnet*"]

[tool.pytest.ini_options]
addopts = "-ra"
