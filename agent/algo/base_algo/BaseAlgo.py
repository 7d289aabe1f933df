from abc import ABC
from typing import Optional

import numpy as np

from agent.abstract.AbstractAlgo import AbstractAlgo


class BaseAlgo(AbstractAlgo, ABC):
    def __init__(self, rng: Optional[np.random.Generator]=None, *args, **kwargs):
        self.rng = rng if rng is not None else np.random.default_rng()
        super().__init__(*args, **kwargs)

