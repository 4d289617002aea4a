"""Success dice and dice pools."""

from .success_die import DIE_SIDES, SuccessDie
from .success_pool import RerollCriteria, RerollMode, SuccessDicePool

__all__ = [
    "DIE_SIDES", "SuccessDie",
    "RerollCriteria", "RerollMode", "SuccessDicePool",
]
