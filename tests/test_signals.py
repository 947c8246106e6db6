import math
import random

import pytest

from tuigallery.signals import RandomSignal, SinSignal


def test_random_signal_stays_in_range():
    signal = RandomSignal(0, 100, random.Random(1))
    values = [next(signal) for _ in range(500)]
    assert all(0 <= value < 100 for value in values)


def test_random_signal_is_reproducible_with_seed():
    first = RandomSignal(0, 100, random.Random(42))
    second = RandomSignal(0, 100, random.Random(42))
    assert [next(first) for _ in range(20)] == [next(second) for _ in range(20)]


def test_random_signal_is_its_own_iterator():
    signal = RandomSignal(3, 4)
    assert iter(signal) is signal
    assert next(signal) == 3


def test_random_signal_rejects_empty_range():
    with pytest.raises(ValueError):
        RandomSignal(5, 5)


def test_sin_signal_starts_at_origin():
    assert next(SinSignal(0.2, 3.0, 18.0)) == (0.0, 0.0)


def test_sin_signal_take_advances_x():
    signal = SinSignal(1.0, 2.0, 10.0)
    points = signal.take(4)
    assert [x for x, _ in points] == [0.0, 1.0, 2.0, 3.0]
    assert next(signal)[0] == 4.0


def test_sin_signal_bounded_by_scale():
    points = SinSignal(0.1, 2.0, 10.0).take(300)
    assert all(abs(y) <= 10.0 for _, y in points)
    assert max(y for _, y in points) > 9.9


def test_sin_signal_matches_period():
    signal = SinSignal(math.pi, 2.0, 5.0)
    points = signal.take(2)
    assert points[1][1] == pytest.approx(5.0)