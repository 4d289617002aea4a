"""Tests for single success dice."""

import random
from dataclasses import FrozenInstanceError

import pytest

from exalted_roller.game.success_die import DIE_SIDES, SuccessDie


class TestCreate:
    """Test rolling a new die."""

    def test_initial_history(self, scripted):
        """A new die records its first value as the initial roll."""
        die = SuccessDie.create(scripted(7))
        assert die.value == 7
        assert die.history == ((7, "Initial"),)
        assert die.frozen is False
        assert die.reroll_count == 0

    def test_values_in_range(self):
        """Faces are always between 1 and 10."""
        rng = random.Random(42)
        values = {SuccessDie.create(rng).value for _ in range(500)}
        assert values <= set(range(1, DIE_SIDES + 1))
        assert len(values) == DIE_SIDES

    def test_default_random_source(self):
        """Omitting the random source still rolls a valid face."""
        die = SuccessDie.create()
        assert 1 <= die.value <= DIE_SIDES


class TestRoll:
    """Test rerolling a die."""

    def test_prepends_history(self, scripted):
        """The newest value sits at the front of the history."""
        die = SuccessDie.create(scripted(3)).roll("Reroll non successes", scripted(5))
        assert die.value == 5
        assert die.history == ((5, "Reroll non successes"), (3, "Initial"))
        assert die.reroll_count == 1

    def test_original_untouched(self, scripted):
        """Rerolling returns a new die and leaves the old one alone."""
        original = SuccessDie.create(scripted(3))
        original.roll("again", scripted(9))
        assert original.value == 3
        assert original.history == ((3, "Initial"),)

    def test_frozen_carried_through(self, scripted):
        """The frozen flag survives a reroll."""
        die = SuccessDie(value=4, history=((4, "Initial"),), frozen=True)
        rolled = die.roll("again", scripted(8))
        assert rolled.frozen is True

    def test_history_grows_per_reroll(self, scripted):
        """Each reroll adds exactly one entry; the oldest stays Initial."""
        die = SuccessDie.create(scripted(2))
        for value in (4, 6, 9):
            die = die.roll("again", scripted(value))
        assert len(die.history) == 4
        assert die.history[0][0] == die.value
        assert die.history[-1] == (2, "Initial")

    def test_immutable(self, scripted):
        """Dice cannot be changed in place."""
        die = SuccessDie.create(scripted(3))
        with pytest.raises(FrozenInstanceError):
            die.value = 10


class TestStr:
    """Test die rendering."""

    def test_plain(self, scripted):
        assert str(SuccessDie.create(scripted(8))) == "8"

    def test_with_trail(self, scripted):
        """Rerolled dice show the values they passed through, oldest first."""
        die = SuccessDie.create(scripted(3)).roll("a", scripted(5)).roll("b", scripted(6))
        assert str(die) == "6 (3 -> 5 -> 6)"
