import math
import dataclasses
from typing import Optional

import numpy as np

from env.slot_machine.Region import Region


def sample_beta(alpha: float, beta: float, rng: Optional[np.random.Generator]=None) -> float:
    """
    One draw from Beta(alpha, beta) built from two Gamma variates:
    X ~ Gamma(alpha, 1), Y ~ Gamma(beta, 1), return X / (X + Y).

    The shortcut u**(1/alpha) / (u**(1/alpha) + v**(1/beta)) on two uniforms is only exact for alpha = beta = 1
    and is not used here.
    """
    # Beta distri requires a and b to > 0
    assert alpha > 0 and beta > 0, f"Beta parameters should be > 0, get alpha={alpha}, beta={beta}"
    rng = rng or np.random.default_rng()
    x = rng.gamma(alpha, 1.0)
    y = rng.gamma(beta, 1.0)
    return float(x / (x + y))


def update_region(region: Region, success: bool) -> Region:
    """
    Posterior update after one observed outcome: Beta(alpha + s, beta + f).

    Returns a new Region, the caller replaces the stored one.
    """
    return dataclasses.replace(
        region,
        alpha=region.alpha + (1 if success else 0),
        beta=region.beta + (0 if success else 1),
        success_count=region.success_count + (1 if success else 0),
        total_attempts=region.total_attempts + 1,
    )


def beta_pdf_curve(alpha: float, beta: float, points: int=100) -> tuple[np.ndarray, np.ndarray]:
    """
    Density of Beta(alpha, beta) on `points` evenly spaced cell midpoints of (0, 1).

    :return: (x values, density values)
    """
    assert alpha > 0 and beta > 0, f"Beta parameters should be > 0, get alpha={alpha}, beta={beta}"
    assert points > 0
    x = (np.arange(points) + 0.5) / points
    log_norm = math.lgamma(alpha + beta) - math.lgamma(alpha) - math.lgamma(beta)
    log_pdf = log_norm + (alpha - 1) * np.log(x) + (beta - 1) * np.log1p(-x)
    return x, np.exp(log_pdf)
