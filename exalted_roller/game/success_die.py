"""A single ten-sided success die with a full reroll history."""

import logging
import random
from dataclasses import dataclass, replace
from typing import Protocol

logger = logging.getLogger(__name__)

DIE_SIDES = 10
INITIAL_REASON = "Initial"

_default_rng = random.Random()


class RandomSource(Protocol):
    """Anything that can draw a uniform integer, e.g. ``random.Random``."""

    def randint(self, a: int, b: int) -> int: ...


def draw_face(rng: RandomSource | None = None) -> int:
    """Draw one face value in [1, DIE_SIDES]."""
    return (rng or _default_rng).randint(1, DIE_SIDES)


@dataclass(frozen=True)
class SuccessDie:
    """One die of a success pool.

    ``history`` lists every (value, reason) pair the die has shown, newest
    first. The last entry is always the initial roll.
    """

    value: int
    history: tuple[tuple[int, str], ...]
    frozen: bool = False

    @classmethod
    def create(cls, rng: RandomSource | None = None) -> "SuccessDie":
        """Roll a fresh die.

        Args:
            rng: Random source. Uses the module default if not provided.

        Returns:
            New SuccessDie with a single "Initial" history entry
        """
        value = draw_face(rng)
        return cls(value=value, history=((value, INITIAL_REASON),))

    def roll(self, reason: str, rng: RandomSource | None = None) -> "SuccessDie":
        """Reroll this die, recording why.

        Args:
            reason: Audit label stored alongside the new value
            rng: Random source. Uses the module default if not provided.

        Returns:
            New SuccessDie; this one is left untouched
        """
        value = draw_face(rng)
        logger.debug("Rerolled %d -> %d (%s)", self.value, value, reason)
        return replace(self, value=value, history=((value, reason),) + self.history)

    @property
    def reroll_count(self) -> int:
        """Number of times this die has been rerolled."""
        return len(self.history) - 1

    def __str__(self) -> str:
        if not self.reroll_count:
            return str(self.value)
        trail = " -> ".join(str(value) for value, _ in reversed(self.history))
        return f"{self.value} ({trail})"
