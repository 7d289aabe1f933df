"""Shared helpers: the error taxonomy of the simulation and small generic utilities.

Plotting lives in `utils.plotting` so that importing the engine never pulls matplotlib in.
"""

from .utils import (
    SimulationError,
    ConfigurationError,
    InvalidStateError,
    RandomGeneratorError,
    random_verifier,
    combination_dict,
)

__all__ = [
    "SimulationError",
    "ConfigurationError",
    "InvalidStateError",
    "RandomGeneratorError",
    "random_verifier",
    "combination_dict",
]
