from powersplit.errors import PowerSplitError, ValidationError, DegenerateBound, NoSolution
from powersplit.power import input_power
from powersplit.search import SearchResult, find_best
from powersplit.network import Gate, Leaf, Network
from powersplit.synthesizer import build_network
from powersplit.planner import Plan, plan

__version__ = "0.1.0"
