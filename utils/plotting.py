from typing import Optional, Sequence, Union

import numpy as np
from matplotlib import pylab as plt # type: ignore

from agent.algo.BetaPosterior import beta_pdf_curve
from agent.result_recorder.RewardHistory import RewardHistory
from env.slot_machine.Region import Region


def plot_general(data: Union[list[float], np.ndarray], path: str='results/default.png', xlabel: str="run",
                 ylabel: str="successes", title: Optional[str]=None) -> None:
    plt.figure(figsize=(10, 7))
    plt.plot(data)
    if title is not None:
        plt.title(title)
    plt.xlabel(xlabel, fontsize=22)
    plt.ylabel(ylabel, fontsize=22)
    plt.savefig(path)
    plt.close()


def plot_learning_curve(history: RewardHistory, path: str='results/learning_curve.png', window: int=10,
                        title: Optional[str]="Learning Progress") -> None:
    """
    Individual rewards as dots, the trailing moving average and the overall success rate as lines.
    """
    attempts = np.arange(1, len(history) + 1)
    plt.figure(figsize=(10, 7))
    plt.plot(attempts, history.get_rewards(), '.', color="grey", alpha=0.5, label="Individual Attempts")
    plt.plot(attempts, history.moving_average(window), color="c", label="Recent Success Rate")
    plt.plot(attempts, history.cumulative_success_rate(), '--', color="r", label="Overall Success Rate")
    plt.ylim(bottom=-0.05, top=1.05)
    if title is not None:
        plt.title(title)
    plt.xlabel("Attempt Number", fontsize=22)
    plt.ylabel("Success Rate", fontsize=22)
    plt.legend()
    plt.savefig(path)
    plt.close()


def plot_beta_distributions(regions: Sequence[Region], path: str='results/beta_distributions.png',
                            points: int=100, title: Optional[str]="Posterior distributions") -> None:
    plt.figure(figsize=(10, 7))
    for region in regions:
        x, pdf = beta_pdf_curve(region.alpha, region.beta, points=points)
        plt.plot(x, pdf, label=f"{region.name} (alpha={region.alpha:g}, beta={region.beta:g})")
    if title is not None:
        plt.title(title)
    plt.xlabel("Effectiveness", fontsize=22)
    plt.ylabel("Density", fontsize=22)
    plt.legend()
    plt.savefig(path)
    plt.close()
