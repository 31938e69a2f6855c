import pytest

from core.dismiss_timer import DismissTimer


def test_fires_when_cumulative_elapsed_reaches_duration():
    timer = DismissTimer(5.0)

    assert timer.tick(2.5) is False
    assert timer.remaining == 2.5
    assert timer.tick(2.5) is True
    assert timer.fired


def test_fires_only_once():
    timer = DismissTimer(1.0)

    assert timer.tick(3.0) is True
    assert timer.tick(3.0) is False


def test_zero_duration_fires_on_first_tick():
    assert DismissTimer(0.0).tick(0.0) is True


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        DismissTimer(-1.0)
