"""Neuron activation functions and their derivatives."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

ActivationFunction = Callable[[float], float]


@dataclass(frozen=True)
class NeuralFunction:
    """A forward activation function paired with its backward derivative.

    The backward function receives the neuron's already-activated output.
    """

    forward: ActivationFunction
    backward: ActivationFunction


def sigmoid(v: float) -> float:
    """Logistic function 1 / (1 + e^-v), computed without overflow."""
    if v >= 0:
        return 1.0 / (1.0 + math.exp(-v))
    e = math.exp(v)
    return e / (1.0 + e)


def softplus(v: float) -> float:
    """Smooth rectifier log(1 + e^v), computed without overflow."""
    if v > 0:
        return v + math.log1p(math.exp(-v))
    return math.log1p(math.exp(v))


def _output_derivative(v: float) -> float:
    return v * (1.0 - v)


SIGMOID = NeuralFunction(sigmoid, _output_derivative)
LINEAR = NeuralFunction(lambda v: v, lambda v: 1.0)
SOFTPLUS_RECTIFIER = NeuralFunction(softplus, _output_derivative)