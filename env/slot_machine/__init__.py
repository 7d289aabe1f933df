"""Region value type, Bernoulli trial simulation and the hidden effectiveness generators."""

from .Region import Region, region_name, simulate_trial
from .EffectivenessGenerator import (
    EffectivenessGenerator,
    TieredEffectivenessGenerator,
    FixedEffectivenessGenerator,
    CallableEffectivenessGenerator,
    make_effectiveness_generator,
)

__all__ = [
    "Region",
    "region_name",
    "simulate_trial",
    "EffectivenessGenerator",
    "TieredEffectivenessGenerator",
    "FixedEffectivenessGenerator",
    "CallableEffectivenessGenerator",
    "make_effectiveness_generator",
]
