"""topocalc.core.solver

Traverse adjustment, Helmert estimation and resection (no UI imports).
"""

from .traverse import compensated_traverse, traverse_walk, orientation_bearing
from .helmert import helmert_fit, helmert_apply, helmert_apply_many
from .resection import resection

__all__ = [
    "compensated_traverse",
    "traverse_walk",
    "orientation_bearing",
    "helmert_fit",
    "helmert_apply",
    "helmert_apply_many",
    "resection",
]
