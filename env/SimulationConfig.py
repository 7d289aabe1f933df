import dataclasses
import numbers
from dataclasses import dataclass

from utils.utils import ConfigurationError

MIN_REGIONS = 2
MAX_REGIONS = 10
RECOMMENDED_BUDGET = (100, 1000)


@dataclass(frozen=True)
class SimulationConfig:
    num_regions: int = 3
    total_budget: int = 300

    def validate(self) -> "SimulationConfig":
        # numpy integers are accepted, bool is an int subclass but never a valid count
        if isinstance(self.num_regions, bool) or not isinstance(self.num_regions, numbers.Integral):
            raise ConfigurationError(f"num_regions should be int. Current type:{type(self.num_regions)}")
        if isinstance(self.total_budget, bool) or not isinstance(self.total_budget, numbers.Integral):
            raise ConfigurationError(f"total_budget should be int. Current type:{type(self.total_budget)}")
        if not MIN_REGIONS <= self.num_regions <= MAX_REGIONS:
            raise ConfigurationError(
                f"num_regions should be in [{MIN_REGIONS}, {MAX_REGIONS}]. Current value:{self.num_regions}")
        if self.total_budget <= 0:
            raise ConfigurationError(f"total_budget should be > 0. Current value:{self.total_budget}")
        if self.total_budget < self.num_regions:
            raise ConfigurationError(
                f"total_budget ({self.total_budget}) should be at least num_regions ({self.num_regions})")
        return dataclasses.replace(self, num_regions=int(self.num_regions), total_budget=int(self.total_budget))

    @property
    def is_recommended_budget(self) -> bool:
        return RECOMMENDED_BUDGET[0] <= self.total_budget <= RECOMMENDED_BUDGET[1]

    @classmethod
    def from_dict(cls, config: dict) -> "SimulationConfig":
        field_names = {field.name for field in dataclasses.fields(cls)}
        unknown = set(config) - field_names
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config).validate()
