from typing import Sequence

import numpy as np

from agent.algo.base_algo.BaseAlgo import BaseAlgo
from agent.algo.BetaPosterior import sample_beta
from env.slot_machine.Region import Region


class ThompsonSampling(BaseAlgo):

    def sample_posteriors(self, regions: Sequence[Region]) -> np.ndarray:
        # one posterior sample per region: theta_k ~ Beta(alpha_k, beta_k)
        return np.array([sample_beta(region.alpha, region.beta, rng=self.rng) for region in regions])

    def choose_action(self, regions: Sequence[Region]) -> int:
        assert len(regions) > 0, "Thompson Sampling needs at least one region"
        estimate_reward_dis = self.sample_posteriors(regions)
        # argmax keeps the first region on exact ties
        action = int(np.argmax(estimate_reward_dis))
        return action
