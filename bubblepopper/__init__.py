"""An arcade game about riding bubbles up to catch stars, built on pygame."""

__version__ = "0.1.0"