from .config import Config, get_config, load_config, set_config
from .graph import Edge, Graph, UnknownNodeError
from .solver import (DisjointSetMSTCalculator, KruskalMSTCalculator,
                     MSTCalculator, available_calculators, calculator_factory,
                     get_calculator, register_calculator)
from .utils import connected_components, graph_from_edges, minimum_spanning_tree
from .version import __version__
