import time
import itertools
from functools import wraps
from typing import Union, Callable, Optional, TypeVar, Any

T = TypeVar('T')


class SimulationError(Exception):
    pass


class ConfigurationError(SimulationError, ValueError):
    pass


class InvalidStateError(SimulationError):
    def __init__(self, state: Any, operation: str) -> None:
        self.state = state
        self.operation = operation
        error_message = f"Can't {operation} while the engine is {getattr(state, 'value', state)}."
        super().__init__(error_message)


class RandomGeneratorError(SimulationError):
    def __init__(self, inf: Union[int, float, None], sup: Union[int, float, None], trial: int) -> None:
        error_message = f"The random generator can't generate a number between ({inf}, {sup}) within {trial} trials."
        super().__init__(error_message)


def random_verifier(rand_func: Callable[[], float], low: Optional[Union[int, float]]=None,
                    up: Optional[Union[int, float]]=None, trial: int=100, strict: bool=False) -> float:
    '''
    Use a given generator to generate random number, if the random number do not fall in the defined interval,
    retry until correct number generated or max trial reached.

    :param rand_func: Random generator function
    :param low: Lower bound of target interval
    :param up: Upper bound of target interval
    :param trial: Max trial number
    :param strict: Exclude the bounds themselves (open interval)
    :return: Generated random number
    '''
    for i in range(trial):
        output = float(rand_func())
        if strict:
            inf_valid = (low is None) or (output > low)
            sup_valid = (up is None) or (output < up)
        else:
            inf_valid = (low is None) or (output >= low)
            sup_valid = (up is None) or (output <= up)
        if inf_valid and sup_valid:
            return output
    raise RandomGeneratorError(low, up, trial)


def func_timer(func: Callable[..., T]) -> Callable[..., T]:
    @wraps(func)
    def func_timer_wrapper(*args, **kwargs) -> T:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        total_time = end_time - start_time
        print(f'Function {func.__name__}{args}{kwargs} took {total_time:.4f} seconds')
        return result

    return func_timer_wrapper


def combination_dict(dicts: dict[Any, list]) -> list[dict]:
    """
    When dicts contains more than one option for certain value, and options for one key are presented as a
    list, this function unpack the dicts and return a list of dictionary with all possible combination, which
    only have one option of each key.

    For example, if dicts = {x: [a, b], y: [c, d], z: [e]}, then return would be [{x: a, y: c, z: e},
    {x: a, y: d, z: e}, {x: b, y: c, z: e}, {x: b, y: d, z: e},]

    All value should be in form of list.
    """
    if not dicts:
        return [{}]
    keys, values = zip(*dicts.items())
    combinations = [dict(zip(keys, combined_value)) for combined_value in itertools.product(*values)]
    return combinations

