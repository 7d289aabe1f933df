from abc import ABC, abstractmethod
from typing import Callable, Collection, Optional, Union

import numpy as np

from utils.utils import ConfigurationError, random_verifier


class EffectivenessGenerator(ABC):
    """
    Source of the hidden effectiveness of each region, asked once per region when a run is set up.
    """

    @abstractmethod
    def generate(self, index: int, total: int) -> float:
        """
        :param index: position of the region in [0, total)
        :param total: number of regions of the run
        :return: success probability in (0, 1)
        """
        raise NotImplementedError("Subclass of EffectivenessGenerator should implement generate methode")

    def generate_all(self, total: int) -> list[float]:
        return [self.generate(i, total) for i in range(total)]


class TieredEffectivenessGenerator(EffectivenessGenerator):
    """
    Guarantees one clearly good region and one clearly bad region, the rest are drawn over a wide span so the
    best region still has to be found by exploring.

    The best and worst indices are designated once per region set (see `designate`), then `generate` draws the
    value for each index from its tier.
    """

    def __init__(self, rng: Optional[np.random.Generator]=None,
                 best_range: tuple[float, float]=(0.7, 0.9),
                 worst_range: tuple[float, float]=(0.1, 0.3),
                 middle_range: tuple[float, float]=(0.1, 0.9)) -> None:
        for low, up in (best_range, worst_range, middle_range):
            assert 0 < low <= up < 1, f"effectiveness ranges should be inside (0, 1), get ({low}, {up})"
        assert worst_range[1] < best_range[0], \
            f"worst range {worst_range} should be strictly below best range {best_range}"
        self.rng = rng or np.random.default_rng()
        self.best_range = best_range
        self.worst_range = worst_range
        self.middle_range = middle_range
        self.best_index: Optional[int] = None
        self.worst_index: Optional[int] = None
        self._total: Optional[int] = None

    def designate(self, total: int) -> tuple[int, int]:
        assert total >= 2, f"at least 2 regions are needed for a best and a worst one, get {total}"
        best_index = int(self.rng.integers(total))
        worst_index = best_index
        while worst_index == best_index:
            worst_index = int(self.rng.integers(total))
        self.best_index, self.worst_index, self._total = best_index, worst_index, total
        return best_index, worst_index

    def generate(self, index: int, total: int) -> float:
        assert 0 <= index < total, f"index should be in [0, {total}), get {index}"
        if self._total != total:
            self.designate(total)

        if index == self.best_index:
            low, up = self.best_range
        elif index == self.worst_index:
            low, up = self.worst_range
        else:
            low, up = self.middle_range
        return float(self.rng.uniform(low, up))

    def generate_all(self, total: int) -> list[float]:
        # A new region set always gets fresh best / worst designations
        self.designate(total)
        return super().generate_all(total)


class FixedEffectivenessGenerator(EffectivenessGenerator):
    def __init__(self, values: Collection[float]) -> None:
        if isinstance(values, (str, bytes)):
            raise ConfigurationError(f"Input invalid ({values!r}) for effectiveness values.")
        try:
            values = [float(value) for value in values]
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Input invalid ({values!r}) for effectiveness values.") from exc
        for value in values:
            if not 0 < value < 1:
                raise ConfigurationError(f"hidden effectiveness should be in (0, 1), current value:{value}")
        self.values = values

    def generate(self, index: int, total: int) -> float:
        if total != len(self.values):
            raise ConfigurationError(
                f"{len(self.values)} fixed effectiveness values can't set up {total} regions")
        return self.values[index]


class CallableEffectivenessGenerator(EffectivenessGenerator):
    """Wraps a plain random function, redrawing until its output lies in (0, 1)."""

    def __init__(self, rand_func: Callable[[], float], trial: int=100) -> None:
        self.rand_func = rand_func
        self.trial = trial

    def generate(self, index: int, total: int) -> float:
        return random_verifier(self.rand_func, 0, 1, trial=self.trial, strict=True)


def make_effectiveness_generator(
        effectiveness: Union[EffectivenessGenerator, Callable[[], float], Collection[float], None]=None,
        rng: Optional[np.random.Generator]=None) -> EffectivenessGenerator:
    # None -> tiered, callable -> verified random function, iterable -> fixed values
    if effectiveness is None:
        return TieredEffectivenessGenerator(rng=rng)
    if isinstance(effectiveness, EffectivenessGenerator):
        return effectiveness
    if callable(effectiveness):
        return CallableEffectivenessGenerator(effectiveness)
    if hasattr(effectiveness, '__iter__'):
        return FixedEffectivenessGenerator(effectiveness)
    raise ConfigurationError(f"Input invalid ({effectiveness}) for effectiveness.")
