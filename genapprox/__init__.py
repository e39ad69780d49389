"""Genetic-algorithm approximation of polynomials by step functions, with a command line."""

__version__ = "0.1.0"