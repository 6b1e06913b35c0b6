# mlpnet

A compact, dependency-free multilayer perceptron in pure Python. It
supports sigmoid, tanh, ReLU and step activations, per-sample
backpropagation with a configurable learning rate and bias input, and
hand-set weights.

## Installation

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Library use

The core lives in `mlpnet.network`:

- `ActivationType`: `SIGMOID`, `TANH`, `RELU`, `STEP`.
- `get_activation(kind)`: returns an `Activation` holding `fn` and
  `derivative`. The functions `sigmoid`, `dsigmoid`, `tanh_act`,
  `dtanh_act`, `relu`, `drelu`, `step` and `dstep` are also available
  directly.
- `Perceptron(inputs, activation=SIGMOID, bias=1.0, rng=None)`: one neuron
  with one weight per input plus a last weight for the bias. Initial
  weights are drawn uniformly from [-1, 1] using `rng`.
- `MultilayerPerceptron(layers, activation=SIGMOID, bias=1.0, eta=0.5, rng=None)`:
  a fully connected network; `layers` lists the size of each layer,
  starting with the input layer.

Training a network on XOR:

    import random
    from mlpnet.network import ActivationType, MultilayerPerceptron

    mlp = MultilayerPerceptron([2, 4, 1], ActivationType.SIGMOID, 1.0, 0.1,
                               rng=random.Random(1))
    samples = [([0, 0], [0]), ([0, 1], [1]), ([1, 0], [1]), ([1, 1], [0])]
    for _ in range(3000):
        mse = sum(mlp.back_propagation(x, y) for x, y in samples) / 4
    print(mlp.run([0, 1]))
    mlp.print_weights()

`back_propagation(x, y)` trains on a single sample and returns its mean
squared error measured before the weights were updated; it raises
`ValueError` if `y` does not match the size of the output layer.
`run(x)` returns the output layer's values. `format_weights()` returns
the weights as text, one line per neuron; `print_weights(file=None)`
writes that text to a file or standard output.

A single `Perceptron` can be given weights directly; the last weight
multiplies the bias:

    from mlpnet.network import Perceptron

    p = Perceptron(2)
    p.set_weights([10, 10, -15])   # behaves as an AND gate
    p.run([1, 1])                  # close to 1

`MultilayerPerceptron.set_weights` takes one list per non-input layer,
each holding one weight list per neuron.

The demo modules can also be used as libraries:

- `mlpnet.xor.train_xor(mlp, activation_name, epochs=3000, out=None)`
  trains on the XOR truth table, stopping early once the MSE drops
  below 0.01, prints progress and returns an `XorReport` (final and best
  MSE, epochs run, the four outputs, the number correct and `accuracy`).
- `mlpnet.segdisplay.SegmentRecognizer(activation, rng)` holds three
  networks for seven-segment digits; `train(epochs)` returns each
  network's mean MSE over the last epoch, and `classify(pattern)` returns
  the digit from the single-output network, the digit from the ten-output
  network and the reconstructed segments.
- `mlpnet.logic_gates.build_and_perceptron()` and `build_xor_network()`
  return gates built from fixed weights.

## Command-line demos

Train XOR networks with sigmoid, tanh and ReLU activations and report
their accuracy (`--seed` makes the run repeatable):

    mlpnet-xor --seed 1

Show an AND perceptron and an XOR network built from hand-set weights:

    mlpnet-logic-gates

Train three networks to recognise seven-segment display digits. The
command reads from standard input the number of epochs, then the
activation (0 sigmoid, 1 tanh, 2 ReLU; anything else falls back to
sigmoid), then patterns of seven space-separated numbers
(`a b c d e f g`) to classify. A negative first value or the end of
input stops it; an epoch count that is not a non-negative integer makes
it exit with status 1. `--seed` is accepted here too:

    mlpnet-segdisplay --seed 1

## What it does not do

Trained weights live only in memory: there is no way to save a network
to a file or load one back, other than reading `format_weights()` and
passing lists to `set_weights()` yourself. Training is one sample at a
time; there are no batches, optimisers or loss functions other than the
mean squared error.