from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class SimulationResults:
    """Final comparison of one exhausted run, computed once when the budget reaches 0."""
    thompson_sampling_successes: int
    uniform_allocation_successes: int
    total_attempts: int
    uniform_attempts: int

    @property
    def improvement(self) -> Optional[float]:
        """Relative gain of Thompson Sampling over uniform allocation, in percent."""
        if self.uniform_allocation_successes == 0:
            return None
        return 100.0 * (self.thompson_sampling_successes - self.uniform_allocation_successes) \
            / self.uniform_allocation_successes

    @property
    def thompson_won(self) -> bool:
        return self.thompson_sampling_successes > self.uniform_allocation_successes

    def to_dict(self) -> dict:
        result_dict = asdict(self)
        result_dict["improvement"] = self.improvement
        return result_dict
