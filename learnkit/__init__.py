"""PCA, an averaged perceptron, CART trees, split measures, isolation forests and activation functions."""

__version__ = "0.1.0"