from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..config import get_config
from ..graph import Graph

_calculators: dict[str, type[MSTCalculator]] = {}


class MSTCalculator(ABC):
    """
    Minimum spanning tree calculator

    Subclasses compute the minimum spanning tree of ``graph``, or a minimum
    spanning forest when the graph is disconnected. Any state a calculator
    keeps between the steps of ``calculate_mst`` is reset at the start of
    each call. A single instance must not be used from several threads at
    once.

    Attributes:
        graph: the graph to calculate the MST for
    """

    name: str = ''

    def __init__(self, graph: Graph):
        self.graph = graph

    @abstractmethod
    def calculate_mst(self) -> Graph:
        """Return a graph with the nodes of ``graph`` and the MST edges."""

    def __repr__(self):
        return f"{type(self).__name__}({self.graph!r})"


Factory = Callable[[Graph], MSTCalculator]


def register_calculator(name: str):
    """Class decorator adding a calculator to the registry under ``name``."""

    def decorator(cls):
        if name in _calculators:
            raise ValueError(f"calculator {name!r} already registered "
                             f"as {_calculators[name].__name__}")
        cls.name = name
        _calculators[name] = cls
        return cls

    return decorator


def available_calculators() -> list[str]:
    return sorted(_calculators)


def calculator_factory(name: Optional[str] = None) -> Factory:
    """
    Look up a calculator

    Args:
        name: registered name, ``None`` for the configured ``mst.algorithm``

    Returns:
        callable taking a graph and returning an ``MSTCalculator``
    """
    if name is None:
        name = get_config().query('mst.algorithm')
    try:
        return _calculators[name]
    except KeyError:
        raise KeyError(f"Unknown MST algorithm {name!r}, "
                       f"available: {available_calculators()}") from None


def get_calculator(graph: Graph, name: Optional[str] = None) -> MSTCalculator:
    return calculator_factory(name)(graph)
