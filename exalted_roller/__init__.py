"""Exalted 3E success dice pool roller."""

from .game import RerollCriteria, RerollMode, SuccessDicePool, SuccessDie

__all__ = ["RerollCriteria", "RerollMode", "SuccessDicePool", "SuccessDie"]
