"""Shared test fixtures."""
from __future__ import annotations

import random

import pytest

from lesson_quiz.db import SubmissionLog


class FixedRandom(random.Random):
    """Seeded Random whose ``random()`` always returns *value*.

    Shuffles and samples still use the seeded bit generator, so only the
    true/false coin flip is pinned.
    """

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self._value = value

    def random(self) -> float:
        return self._value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def always_true_rng():
    return FixedRandom(0.9)


@pytest.fixture
def always_false_rng():
    return FixedRandom(0.1)


@pytest.fixture
def tmp_log(tmp_path):
    return SubmissionLog(tmp_path / "data" / "submissions.json")


@pytest.fixture
def short_lesson():
    return (
        "The Water Cycle\n"
        "The water cycle is the continuous movement of water. "
        "It evaporates and condenses."
    )


@pytest.fixture
def water_cycle_lesson():
    """The sample lesson the page is prefilled with."""
    return """\
The Water Cycle
The water cycle is the continuous movement of water on, above, and below the surface of the Earth. \
Solar energy drives the cycle by heating water in the oceans, which evaporates into water vapor. \
This water vapor rises into the atmosphere, where it cools and condenses around particles to form clouds. \
When the water droplets in clouds become too heavy, they fall to Earth as precipitation in the form of rain, snow, sleet, or hail. \
The fallen water then flows over the ground as surface runoff, eventually returning to the oceans, or it seeps into the ground to become groundwater. \
Some groundwater is stored in aquifers, while some flows back to the surface through springs or is drawn up by plants and returned to the atmosphere through transpiration. \
The water cycle is essential for all life on Earth, as it distributes fresh water around the planet and helps regulate temperature and climate patterns."""
