import random

import pytest

from vertexos.dice import DiceRoller, image_for


def test_rolls_stay_on_the_dice():
    roller = DiceRoller(random.Random(1))
    assert all(1 <= roller.roll() <= 6 for _ in range(500))


def test_every_face_comes_up():
    roller = DiceRoller(random.Random(7))
    assert {roller.roll() for _ in range(600)} == {1, 2, 3, 4, 5, 6}


def test_same_seed_same_rolls():
    first = DiceRoller(random.Random(42))
    second = DiceRoller(random.Random(42))
    assert [first.roll() for _ in range(20)] == [second.roll() for _ in range(20)]


def test_default_generator_rolls():
    roller = DiceRoller()
    assert roller.roll() in range(1, 7)


def test_image_names():
    assert image_for(1) == "dice1.png"
    assert image_for(6) == "dice6.png"


@pytest.mark.parametrize("face", [0, 7, -1])
def test_image_for_rejects_bad_face(face):
    with pytest.raises(ValueError):
        image_for(face)