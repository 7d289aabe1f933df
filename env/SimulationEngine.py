import csv
import os
import threading
from typing import Callable, Collection, Optional, Union

import numpy as np

from agent.abstract.AbstractAlgo import AbstractAlgo
from agent.algo.BetaPosterior import update_region
from agent.algo.ThompsonSampling import ThompsonSampling
from agent.algo.UniformAllocation import attempts_per_region, simulate_uniform
from agent.result_recorder.RewardHistory import RewardHistory
from agent.result_recorder.SimulationResults import SimulationResults
from env.abstract.Environment import AbstractEnvironment
from env.RunSnapshot import EngineState, RunSnapshot
from env.SimulationConfig import SimulationConfig
from env.slot_machine.EffectivenessGenerator import EffectivenessGenerator, make_effectiveness_generator
from env.slot_machine.Region import Region, simulate_trial
from utils.utils import InvalidStateError


class SimulationEngine(AbstractEnvironment):
    """
    Step-wise state machine of one allocation experiment.

    Idle -> Ready (initialize / reset) -> Running (step) -> Exhausted (last step, results computed). The engine
    does no I/O and no timing: an external driver decides when `step` is called. One lock covers each public
    operation, so concurrent callers can't interleave the select / simulate / update / record / decrement
    sequence of a step.
    """

    def __init__(self, config: Optional[SimulationConfig]=None,
                 effectiveness: Union[EffectivenessGenerator, Callable[[], float], Collection[float], None]=None,
                 selector: Optional[AbstractAlgo]=None, seed: Optional[int]=None,
                 rng: Optional[np.random.Generator]=None) -> None:
        self.config = (config or SimulationConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.effectiveness_generator = make_effectiveness_generator(effectiveness, rng=self.rng)
        if selector is None:
            selector = ThompsonSampling(rng=self.rng)
        self.selector = selector

        self._lock = threading.RLock()
        self.state = EngineState.IDLE
        self.regions: list[Region] = []
        self.total_resource_budget = 0
        self.remaining_resource_budget = 0
        self.history = RewardHistory()
        self.results: Optional[SimulationResults] = None

    def initialize(self, num_regions: int, total_budget: int) -> RunSnapshot:
        config = SimulationConfig(num_regions=num_regions, total_budget=total_budget).validate()
        with self._lock:
            # Draw everything that can fail before touching the current run
            effectivenesses = self.effectiveness_generator.generate_all(config.num_regions)
            regions = [Region.create(i, p) for i, p in enumerate(effectivenesses)]
            self.config = config
            self._start_run(regions)
            return self.get_snapshot()

    def reset(self, regenerate: bool=True) -> RunSnapshot:
        """
        Start over with the configured region count and budget.

        :param regenerate: draw new hidden effectivenesses (a new experiment); with False the regions keep their
            effectiveness and only posteriors, counts, history and results are cleared
        """
        with self._lock:
            if regenerate or not self.regions:
                return self.initialize(self.config.num_regions, self.config.total_budget)
            self._start_run([region.cleared() for region in self.regions])
            return self.get_snapshot()

    def _start_run(self, regions: list[Region]) -> None:
        self.regions = regions
        self.total_resource_budget = self.config.total_budget
        self.remaining_resource_budget = self.config.total_budget
        self.history = RewardHistory()
        self.results = None
        self.state = EngineState.READY

    def step(self) -> RunSnapshot:
        with self._lock:
            if self.state is EngineState.IDLE or self.remaining_resource_budget <= 0:
                raise InvalidStateError(self.state, "step")

            index = self.selector.choose_action(self.regions)
            region = self.regions[index]
            success = simulate_trial(region.hidden_effectiveness, self.rng)
            self.regions[index] = update_region(region, success)
            # the outcome that updated the posterior is the one recorded
            self.history.update(region.id, int(success))
            self.remaining_resource_budget -= 1
            self.state = EngineState.RUNNING

            if self.remaining_resource_budget == 0:
                self.results = self._finalize()
                self.state = EngineState.EXHAUSTED
            return self.get_snapshot()

    def _finalize(self) -> SimulationResults:
        return SimulationResults(
            thompson_sampling_successes=sum(region.success_count for region in self.regions),
            uniform_allocation_successes=simulate_uniform(self.regions, self.total_resource_budget, rng=self.rng),
            total_attempts=self.total_resource_budget,
            uniform_attempts=attempts_per_region(self.total_resource_budget, len(self.regions)) * len(self.regions),
        )

    def get_snapshot(self) -> RunSnapshot:
        with self._lock:
            return RunSnapshot(
                state=self.state,
                regions=tuple(self.regions),
                total_resource_budget=self.total_resource_budget,
                remaining_resource_budget=self.remaining_resource_budget,
                reward_history=self.history.get_rewards(),
                results=self.results,
            )

    def get_history(self) -> RewardHistory:
        """Copy of the run history; changing it never touches the engine."""
        with self._lock:
            return self.history.copy()

    def get_hidden_effectiveness(self) -> list[float]:
        return [region.hidden_effectiveness for region in self.regions]

    def export_history_to_csv(self, path: str, run_id: Union[int, str]=0) -> None:
        """
        Append one row per step of the current run to a csv file, the header is only written for a new file.

        :param path: csv file path
        :param run_id: identifier of the run, to tell several runs apart in one file
        """
        fieldnames = ["agent_name", "run", "step", "region_id", "reward", "hidden_effectiveness"]
        with self._lock:
            effectiveness_by_id = {region.id: region.hidden_effectiveness for region in self.regions}
            rows = [
                {"agent_name": self.selector.name, "run": run_id, "step": step + 1, "region_id": region_id,
                 "reward": reward, "hidden_effectiveness": effectiveness_by_id[region_id]}
                for step, (region_id, reward) in enumerate(zip(self.history.get_actions(), self.history.get_rewards()))
            ]

        file_exist = os.path.isfile(path)
        with open(path, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            if not file_exist:
                writer.writeheader()
            writer.writerows(rows)
