import numpy as np
from typing_extensions import override

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder


class RewardHistory(AbstractResultRecorder):
    """
    Append-only record of one run: for each step the region that got the resource unit and the binary reward
    that the same step used to update that region's posterior.
    """

    def __init__(self):
        self.actions: list[int] = []
        self.rewards: list[int] = []

    def __str__(self):
        return ",".join(f"{action}*" if reward else f"{action}" for action, reward in zip(self.actions, self.rewards))

    def __len__(self):
        return len(self.rewards)

    @override
    def update(self, region_id: int, reward: int) -> None:
        assert reward in (0, 1), f"reward should be 0 or 1, get {reward}"
        self.actions.append(int(region_id))
        self.rewards.append(int(reward))

    @override
    def get_summary(self) -> dict[str, int]:
        return {"steps": len(self.rewards), "successes": self.total_reward()}

    def copy(self) -> "RewardHistory":
        history = RewardHistory()
        history.actions = list(self.actions)
        history.rewards = list(self.rewards)
        return history

    def total_reward(self) -> int:
        return sum(self.rewards)

    def get_rewards(self) -> tuple[int, ...]:
        return tuple(self.rewards)

    def get_actions(self) -> tuple[int, ...]:
        return tuple(self.actions)

    def moving_average(self, window: int=10) -> np.ndarray:
        """
        Trailing success rate over the last `window` steps; the first steps average over what is available.
        """
        assert window > 0, f"window should be > 0, get {window}"
        rewards = np.asarray(self.rewards, dtype=float)
        if rewards.size == 0:
            return rewards
        cumsum = np.concatenate(([0.0], np.cumsum(rewards)))
        ends = np.arange(1, rewards.size + 1)
        starts = np.maximum(ends - window, 0)
        return (cumsum[ends] - cumsum[starts]) / (ends - starts)

    def cumulative_success_rate(self) -> np.ndarray:
        rewards = np.asarray(self.rewards, dtype=float)
        return np.cumsum(rewards) / np.arange(1, rewards.size + 1)
