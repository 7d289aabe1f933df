from abc import ABC, abstractmethod


class AbstractEnvironment(ABC):

    @abstractmethod
    def initialize(self, *args, **kwargs):
        """
        Set up a fresh run
        :return: snapshot of the new run
        """
        raise NotImplementedError("Subclass of Environment should implement initialize methode")

    @abstractmethod
    def step(self):
        """
        Spend one resource unit and return the resulting state
        :return: snapshot after the step
        """
        raise NotImplementedError("Subclass of Environment should implement step methode")

    @abstractmethod
    def reset(self):
        """
        Reset the env

        :return: The initial state
        """
        raise NotImplementedError("Subclass of Environment should implement reset methode")

    @abstractmethod
    def get_snapshot(self):
        """

        :return: Current state, read only
        """
        raise NotImplementedError("Subclass of Environment should implement get_snapshot methode")

    def env_snap(self) -> dict:
        return self.get_snapshot().to_dict()
