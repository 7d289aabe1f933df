from abc import ABC, abstractmethod
from typing import Sequence

from env.slot_machine.Region import Region


class AbstractAlgo(ABC):

    def __init__(self, name=None):
        if name is None:
            self.name = type(self).__name__
        else:
            assert type(name) == str, f"Name of an algo should be a str, received {type(name)}"
            self.name = name

    @abstractmethod
    def choose_action(self, regions: Sequence[Region]) -> int:
        """
        Choose the region that receives the next resource unit
        :param regions: current regions, in run order
        :return: the index of the chosen region in `regions`
        """
        raise NotImplementedError("Subclass of AbstractAlgo should implement choose_action methode")

    def select(self, regions: Sequence[Region]) -> Region:
        return regions[self.choose_action(regions)]
