"""Order resequencing services."""

from .costs import OverrideLookup, sequence_totals, total_downtime, transition_cost
from .optimizer import optimize

__all__ = [
    "optimize",
    "OverrideLookup",
    "transition_cost",
    "sequence_totals",
    "total_downtime",
]
