"""Exalted 3E success dice pools: rolling, success counting and rerolls."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

from ..config import PoolRulesConfig, get_config
from .success_die import DIE_SIDES, RandomSource, SuccessDie

logger = logging.getLogger(__name__)

FACES = frozenset(range(1, DIE_SIDES + 1))
RULE_FIELDS = ("success", "double", "stunt", "wound")


class RerollCriteria(Enum):
    """Named sets of faces to reroll."""

    NOT_SUCCESS = "not_success"
    NOT_10S = "not_10s"


class RerollMode(Enum):
    """How many reroll passes to apply."""

    ONCE = "once"
    UNTIL_NONE = "until_none"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SuccessDicePool:
    """A rolled pool of success dice plus the rules used to score it.

    Every operation that changes the pool returns a new pool.
    """

    dice: tuple[SuccessDie, ...] = ()
    success: frozenset[int] = frozenset({7, 8, 9, 10})
    double: frozenset[int] = frozenset({10})
    stunt: int = 0
    wound: int = 0
    rng: RandomSource | None = field(default=None, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        count: int,
        *,
        rules: PoolRulesConfig | None = None,
        rng: RandomSource | None = None,
        **overrides,
    ) -> "SuccessDicePool":
        """Create and roll a new pool.

        Args:
            count: Number of dice requested, before stunt and wound adjustments
            rules: Base rule values. Uses the loaded config if not provided.
            rng: Random source for every die this pool rolls
            **overrides: Replacement values for success, double, stunt or wound

        Returns:
            Freshly rolled SuccessDicePool

        Raises:
            ValueError: If count is not a positive integer
            TypeError: If an override names an unknown rule
        """
        if not _is_int(count) or count < 1:
            raise ValueError(f"Dice count must be a positive integer, got {count!r}")

        unknown = set(overrides) - set(RULE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown pool rule override(s): {', '.join(sorted(unknown))}")

        values = (rules or get_config().rules).model_dump()
        values.update(overrides)

        pool = cls(
            success=frozenset(values["success"]),
            double=frozenset(values["double"]),
            stunt=values["stunt"],
            wound=values["wound"],
            rng=rng,
        )
        return pool.roll(count)

    def roll(self, count: int | None = None) -> "SuccessDicePool":
        """Replace every die in the pool with a fresh roll.

        The stunt bonus and wound penalty are applied to ``count``. Without a
        count, the current number of dice is used as the request and the
        adjustments are applied on top of it again.

        Args:
            count: Number of dice requested

        Returns:
            New pool with the same rules and freshly rolled dice

        Raises:
            ValueError: If count is not an integer
        """
        if count is None:
            count = len(self.dice)
        elif not _is_int(count):
            raise ValueError(f"Dice count must be an integer, got {count!r}")

        effective = count + self.wound_dice_penalty() + self.stunt_dice_bonus()
        dice = tuple(SuccessDie.create(self.rng) for _ in range(effective))
        logger.debug("Rolled %d dice (requested %d): %s", len(dice), count, [d.value for d in dice])
        return replace(self, dice=dice)

    def stunt_dice_bonus(self) -> int:
        """Dice added to the pool by the stunt level."""
        return 2 if 1 <= self.stunt <= 3 else 0

    def wound_dice_penalty(self) -> int:
        """Dice removed from the pool by the wound level (zero or negative)."""
        return self.wound

    def is_die_success(self, die: SuccessDie) -> bool:
        return die.value in self.success

    def is_die_double(self, die: SuccessDie) -> bool:
        return die.value in self.double

    def automatic_success_count(self) -> int:
        """Successes granted by a stunt of level 2 or higher."""
        return max(self.stunt - 1, 0)

    def success_count(self) -> int:
        """Total successes: one per success die, one more per double die, plus automatic ones."""
        return (
            sum(1 for die in self.dice if self.is_die_success(die))
            + sum(1 for die in self.dice if self.is_die_double(die))
            + self.automatic_success_count()
        )

    def is_botch(self) -> bool:
        """True when a 1 shows, nothing succeeded, and no stunt protects the roll."""
        return (
            any(die.value == 1 for die in self.dice)
            and not any(self.is_die_success(die) for die in self.dice)
            and self.stunt < 2
        )

    def reroll(
        self,
        criteria: RerollCriteria | str | Iterable[int],
        mode: RerollMode | str = RerollMode.ONCE,
    ) -> "SuccessDicePool":
        """Reroll every die matching the criteria.

        Criteria options:
            RerollCriteria.NOT_SUCCESS - all dice that are not successes
            RerollCriteria.NOT_10S     - all dice that are not tens
            [5, 6]                     - all dice showing a five or a six

        With ``RerollMode.UNTIL_NONE`` passes repeat until no die matches.
        There is no pass limit, so a value set covering every face never
        returns.

        Args:
            criteria: Named criteria (enum or its string value) or face values
            mode: RerollMode or its string value

        Returns:
            New pool with matching dice rerolled and their histories extended

        Raises:
            ValueError: If criteria or mode is an unknown name
        """
        mode = RerollMode(mode)
        values, reason = self._resolve_criteria(criteria, mode)

        if mode is RerollMode.ONCE:
            return self._reroll_pass(values, reason)

        if FACES <= values:
            logger.warning("'%s' matches every face; rerolling will not terminate", reason)

        pool = self
        passes = 0
        while pool._has_match(values):
            pool = pool._reroll_pass(values, reason)
            passes += 1
        logger.debug("'%s' finished after %d pass(es)", reason, passes)
        return pool

    def rerolled_dice(self) -> tuple[SuccessDie, ...]:
        """Dice that have been rerolled at least once."""
        return tuple(die for die in self.dice if die.reroll_count)

    def _resolve_criteria(
        self, criteria: RerollCriteria | str | Iterable[int], mode: RerollMode
    ) -> tuple[frozenset[int], str]:
        if isinstance(criteria, str):
            criteria = RerollCriteria(criteria)

        if criteria is RerollCriteria.NOT_SUCCESS:
            return FACES - self.success, "Reroll non successes"
        if criteria is RerollCriteria.NOT_10S:
            return frozenset(range(1, DIE_SIDES)), "Reroll non 10s"

        values = frozenset(criteria)
        prefix = "Reroll until no" if mode is RerollMode.UNTIL_NONE else "Reroll no"
        return values, f"{prefix} {sorted(values)}"

    def _has_match(self, values: frozenset[int]) -> bool:
        return any(die.value in values for die in self.dice)

    def _reroll_pass(self, values: frozenset[int], reason: str) -> "SuccessDicePool":
        dice = tuple(
            die.roll(reason, self.rng) if die.value in values else die for die in self.dice
        )
        return replace(self, dice=dice)

    def __str__(self) -> str:
        """Human-readable summary of the pool."""
        parts = [f"[{', '.join(str(die.value) for die in self.dice)}]"]
        parts.append(f"successes={self.success_count()}")

        modifiers = []
        if self.stunt:
            modifiers.append(f"stunt {self.stunt}")
        if self.wound:
            modifiers.append(f"wound {self.wound}")
        if modifiers:
            parts.append(f"({', '.join(modifiers)})")

        if self.is_botch():
            parts.append("BOTCH")

        return " ".join(parts)
