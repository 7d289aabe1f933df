import logging
from typing import Callable, Optional

from tqdm import tqdm

from agent.result_recorder.ComparisonResult import ComparisonResult
from agent.result_recorder.SimulationResults import SimulationResults
from env.RunSnapshot import RunSnapshot
from env.SimulationEngine import SimulationEngine


class SimulationDriver:
    """
    External loop around a SimulationEngine. The engine has no timer of its own: the driver calls `step` until
    the budget is exhausted and hands every snapshot to an optional observer (chart, progress display...).
    """

    def __init__(self, on_step: Optional[Callable[[RunSnapshot], None]]=None, max_steps: Optional[int]=None):
        self.on_step = on_step
        self.max_steps = max_steps

    def single_run(self, engine: SimulationEngine, display: bool=False) -> Optional[SimulationResults]:
        """
        Step the engine until it is exhausted (or `max_steps` steps were taken, which pauses the run).

        :return: the run results, None when the run was paused before the budget ran out
        """
        snapshot = engine.get_snapshot()
        moves_count = 0
        while not snapshot.is_exhausted:
            if self.max_steps is not None and moves_count >= self.max_steps:
                break
            snapshot = engine.step()
            moves_count += 1
            if self.on_step is not None:
                self.on_step(snapshot)

        if snapshot.results is not None:
            logging.info(f"Run finished after {snapshot.steps_taken} steps, history:{engine.get_history()}")
            logging.info(f"Results:{snapshot.results.to_dict()}")
            if display:
                print(f"Thompson Sampling: {snapshot.results.thompson_sampling_successes} successes, "
                      f"Uniform Allocation: {snapshot.results.uniform_allocation_successes} successes")
        return snapshot.results

    def multi_run(self, engine: SimulationEngine, runs: int=100, display: bool=False,
                  history_path: Optional[str]=None) -> ComparisonResult:
        """
        Reset and run the engine `runs` times with its configured region count and budget.

        :param history_path: when given, every run's step history is appended to this csv file
        """
        assert runs > 0, f"runs should be > 0, get {runs}"
        comparison = ComparisonResult(engine.selector.name)
        for run in tqdm(range(runs), disable=not display):
            engine.reset()
            results = self.single_run(engine)
            assert results is not None, "multi_run needs runs that reach the end of the budget"
            comparison.update(results, run=run, env_snap=engine.env_snap())
            if history_path is not None:
                engine.export_history_to_csv(history_path, run_id=run)

        comparison.log(display=display)
        return comparison
