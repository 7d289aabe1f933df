from dataclasses import dataclass
from enum import Enum
from typing import Optional

from agent.result_recorder.SimulationResults import SimulationResults
from env.slot_machine.Region import Region


class EngineState(Enum):
    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RunSnapshot:
    """
    Read-only view of a run for the presentation layer. Regions are immutable values, so a snapshot never
    changes after it has been taken.
    """
    state: EngineState
    regions: tuple[Region, ...]
    total_resource_budget: int
    remaining_resource_budget: int
    reward_history: tuple[int, ...]
    results: Optional[SimulationResults]

    @property
    def steps_taken(self) -> int:
        return len(self.reward_history)

    @property
    def is_exhausted(self) -> bool:
        return self.state is EngineState.EXHAUSTED

    def to_dict(self, include_hidden: bool=False) -> dict:
        return {
            "state": self.state.value,
            "regions": [region.to_dict(include_hidden=include_hidden) for region in self.regions],
            "total_resource_budget": self.total_resource_budget,
            "remaining_resource_budget": self.remaining_resource_budget,
            "reward_history": list(self.reward_history),
            "results": self.results.to_dict() if self.results is not None else None,
        }
