import math

import pytest

from musicstack.rhythm.beat import Beat


def test_beat_arithmetic():
    a = Beat(4.0)
    b = Beat(1.5)
    a += b
    assert math.isclose(float(a), 5.5, abs_tol=1e-9)
    a -= b
    assert math.isclose(float(a), 4.0, abs_tol=1e-9)


def test_beat_sub_raises_when_negative():
    with pytest.raises(ValueError, match="beat subtraction cannot go negative"):
        Beat(1.0) - Beat(2.0)


def test_checked_sub_returns_none_when_negative():
    assert Beat(1.0).checked_sub(Beat(2.0)) is None
    assert Beat(2.0).checked_sub(Beat(2.0)) == Beat.zero()


def test_zero_is_identity():
    b = Beat(3.25)
    assert b + Beat.zero() == b
    assert float(Beat.zero()) == 0.0


@pytest.mark.parametrize("bad", [-0.5, math.inf, math.nan])
def test_invalid_beat_rejected(bad):
    with pytest.raises(ValueError, match="finite and non-negative"):
        Beat(bad)


def test_ordering():
    assert Beat(1.0) < Beat(2.0)
    assert sorted([Beat(3.0), Beat(1.0)]) == [Beat(1.0), Beat(3.0)]