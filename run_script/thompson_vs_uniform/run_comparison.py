import sys
import os
import logging
from pathlib import Path

# Ensure project root is in sys.path so imports like `agent.*` and `env.*` work
# when running this script directly. The project root is 2 parents above this file.
project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agent.SimulationDriver import SimulationDriver
from env.SimulationConfig import SimulationConfig
from env.SimulationEngine import SimulationEngine
from run_script.utils import prepare_results_directory, setup_logging
from utils.utils import combination_dict, func_timer
from utils.plotting import plot_general, plot_learning_curve, plot_beta_distributions

"""
Compare Thompson Sampling against uniform allocation over repeated experiments, for every combination of
the settings below. Each combination gets its own csv history and plots in a numbered results directory.
"""

SEED = 123
RUNS = 100
display = True

sweep_config = {
    "num_regions": [3, 5, 10],
    "total_budget": [100, 300, 1000],
}


@func_timer
def run_configuration(env_config: dict, plot_dir_path: str, history_path: str) -> dict:
    config = SimulationConfig.from_dict(env_config)
    engine = SimulationEngine(config=config, seed=SEED)
    driver = SimulationDriver()

    comparison = driver.multi_run(engine, runs=RUNS, display=display, history_path=history_path)

    tag = f"r{config.num_regions}_b{config.total_budget}"
    gains = [results.thompson_sampling_successes - results.uniform_allocation_successes
             for results in comparison.get_results().values()]
    plot_general(gains, path=os.path.join(plot_dir_path, f"gain_{tag}.png"), ylabel="TS - uniform",
                 title=f"{config.num_regions} regions, budget {config.total_budget}")
    # Last run of the sweep point, as the presentation layer would show it
    plot_learning_curve(engine.get_history(), path=os.path.join(plot_dir_path, f"learning_{tag}.png"))
    plot_beta_distributions(engine.get_snapshot().regions, path=os.path.join(plot_dir_path, f"beta_{tag}.png"))

    summary = comparison.get_summary_dict()
    summary.update(env_config)
    return summary


def main():
    test_dir = prepare_results_directory()
    plot_dir_path = setup_logging(test_dir)

    for env_config in combination_dict(sweep_config):
        logging.info(f"Configuration: {env_config}")
        history_path = os.path.join(
            test_dir, f"history_r{env_config['num_regions']}_b{env_config['total_budget']}.csv")
        summary = run_configuration(env_config, plot_dir_path, history_path)
        print(f"{env_config}: win percentage {100.0 * summary['win_perc']:.1f}%, "
              f"average improvement {summary['average_improvement']}")


if __name__ == '__main__':
    main()
