from typing import Optional, Sequence

import numpy as np

from env.slot_machine.Region import Region, simulate_trial


def attempts_per_region(total_budget: int, region_nb: int) -> int:
    # Floor division, the remainder is discarded and never redistributed
    assert region_nb > 0, f"region_nb should be > 0. Current value:{region_nb}"
    return total_budget // region_nb


def simulate_uniform(regions: Sequence[Region], total_budget: int,
                     rng: Optional[np.random.Generator]=None) -> int:
    """
    Non-adaptive baseline: every region gets floor(total_budget / len(regions)) independent Bernoulli trials
    against its hidden effectiveness.

    Reads the regions only, the live posteriors are never touched.

    :return: total number of successes over all regions
    """
    rng = rng or np.random.default_rng()
    attempts = attempts_per_region(total_budget, len(regions))
    successes = 0
    for region in regions:
        for _ in range(attempts):
            if simulate_trial(region.hidden_effectiveness, rng):
                successes += 1
    return successes
