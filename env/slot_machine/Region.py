from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np


def region_name(index: int) -> str:
    # 0 -> "Region A", 1 -> "Region B", ...
    return f"Region {chr(65 + index)}"


@dataclass(frozen=True)
class Region:
    """
    One arm of the allocation problem.

    alpha / beta are the Beta posterior pseudo-counts, both start at 1 (uniform prior) and always equal
    1 + success_count and 1 + failures. hidden_effectiveness is the true success probability; only the trial
    simulator and diagnostics read it, never the selector.
    """
    id: int
    name: str
    hidden_effectiveness: float
    alpha: float = 1.0
    beta: float = 1.0
    success_count: int = 0
    total_attempts: int = 0

    @classmethod
    def create(cls, index: int, hidden_effectiveness: float) -> "Region":
        return cls(id=index + 1, name=region_name(index), hidden_effectiveness=float(hidden_effectiveness))

    @property
    def failure_count(self) -> int:
        return self.total_attempts - self.success_count

    @property
    def posterior_mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def cleared(self) -> "Region":
        """Same region and hidden effectiveness, posterior back to the uniform prior."""
        return Region(id=self.id, name=self.name, hidden_effectiveness=self.hidden_effectiveness)

    def to_dict(self, include_hidden: bool=False) -> dict:
        region_dict = asdict(self)
        if not include_hidden:
            del region_dict["hidden_effectiveness"]
        return region_dict


def simulate_trial(p: float, rng: Optional[np.random.Generator]=None) -> bool:
    """
    Draw one Bernoulli outcome with success probability p.

    Every call consumes exactly one fresh uniform draw, callers must not reuse an outcome for two decisions.
    """
    assert 0 <= p <= 1, f"the success probability should be between [0,1], current value:{p}"
    rng = rng or np.random.default_rng()
    return bool(rng.random() < p)
