import logging
from typing import Optional

from typing_extensions import override

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder
from agent.result_recorder.SimulationResults import SimulationResults


class ComparisonResult(AbstractResultRecorder):
    def __init__(self, agent_name=None):
        self.agent_name = agent_name
        self.thompson_wins = 0
        self.thompson_successes = 0
        self.uniform_successes = 0
        self.nb_runs = 0

        # Key: run
        self.results: dict[int, SimulationResults] = {}
        self.env_snaps: dict[int, dict] = {}

    @override
    def update(self, results: SimulationResults, run: Optional[int]=None, env_snap: Optional[dict]=None) -> None:
        if results.thompson_won:
            self.thompson_wins += 1
        self.thompson_successes += results.thompson_sampling_successes
        self.uniform_successes += results.uniform_allocation_successes
        run = self.nb_runs if run is None else run
        self.nb_runs += 1
        self.results[run] = results
        if env_snap is not None:
            self.env_snaps[run] = env_snap

    def get_results(self):
        return self.results

    def get_env_snaps(self):
        return self.env_snaps

    @override
    def get_summary(self):
        assert self.nb_runs > 0, "No run recorded yet"
        win_perc = float(self.thompson_wins) / float(self.nb_runs)
        average_thompson = float(self.thompson_successes) / float(self.nb_runs)
        average_uniform = float(self.uniform_successes) / float(self.nb_runs)

        return win_perc, average_thompson, average_uniform

    def get_average_improvement(self) -> Optional[float]:
        improvements = [r.improvement for r in self.results.values() if r.improvement is not None]
        if not improvements:
            return None
        return sum(improvements) / len(improvements)

    def get_summary_dict(self):
        win_perc, average_thompson, average_uniform = self.get_summary()
        output_dict = {
            "agent_name": self.agent_name,
            "win_perc": win_perc,
            "average_thompson_successes": average_thompson,
            "average_uniform_successes": average_uniform,
            "average_improvement": self.get_average_improvement(),
            "nb_runs": self.nb_runs,
        }
        return output_dict

    def log(self, display=False):
        win_perc, average_thompson, average_uniform = self.get_summary()
        logging.info(f"Agent name:{self.agent_name}")
        logging.info(f"Runs: {self.nb_runs}, # won against uniform allocation: {self.thompson_wins}")
        logging.info(f"Win percentage: {100.0 * win_perc}%")
        logging.info(f"Average successes, thompson: {average_thompson}, uniform: {average_uniform}")
        if display:
            print(f"Agent name:{self.agent_name}")
            print(f"Win percentage: {100.0 * win_perc}%")
            print(f"Average successes, thompson: {average_thompson}, uniform: {average_uniform}")
