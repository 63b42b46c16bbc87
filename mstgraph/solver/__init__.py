from .base import (Factory, MSTCalculator, available_calculators,
                   calculator_factory, get_calculator, register_calculator)
from .disjoint_set import DisjointSet, DisjointSetMSTCalculator
from .kruskal import KruskalMSTCalculator
