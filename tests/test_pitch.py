import pytest
from hypothesis import given
from hypothesis import strategies as st

from musicstack.theory.interval import Interval, Temperament
from musicstack.theory.pitch import Pitch, PitchClass

T24 = Temperament(24, "24-TET")


def test_pitch_class_transposition_wraps():
    c = PitchClass.from_semitones(0)
    g = c.transpose(Interval.from_semitones(7))
    assert g.to_semitones() == 7
    back = g.transpose(Interval.from_semitones(-7))
    assert back.to_semitones() == 0
    b = c.transpose(Interval.from_semitones(-1))
    assert b.to_semitones() == 11


def test_pitch_transposition_updates_octaves():
    c4 = Pitch.from_semitones_and_octave(0, 4)
    d5 = c4.transpose(Interval.from_semitones(14))
    assert d5.semitone() == 2
    assert d5.octave == 5
    back = d5.transpose(Interval.from_semitones(-14))
    assert back.semitone() == 0
    assert back.octave == 4


def test_octave_shifts_and_ordering():
    g4 = Pitch.from_semitones_and_octave(7, 4)
    g5 = g4.octave_up()
    g3 = g4.octave_down()
    assert g5.octave == 5
    assert g3.octave == 3
    assert g3 < g4
    assert g4 < g5


def test_pitch_class_index_is_normalised():
    assert PitchClass.from_semitones(12) == PitchClass.from_semitones(0)
    assert hash(PitchClass.from_semitones(19)) == hash(PitchClass.from_semitones(7))


@given(st.integers(0, 11), st.integers(-200, 200))
def test_pitch_class_transpose_round_trip(start, steps):
    pc = PitchClass.from_semitones(start)
    moved = pc.transpose(Interval.from_semitones(steps))
    assert 0 <= moved.to_semitones() < 12
    assert moved.transpose(Interval.from_semitones(-steps)) == pc


@given(st.integers(0, 11), st.integers(-20, 20), st.integers(-300, 300))
def test_pitch_transpose_round_trip(semis, octave, steps):
    pitch = Pitch.from_semitones_and_octave(semis, octave)
    moved = pitch.transpose(Interval.from_semitones(steps))
    assert moved.octave * 12 + moved.semitone() == octave * 12 + semis + steps
    assert moved.transpose(Interval.from_semitones(-steps)) == pitch


@given(st.integers(0, 11), st.integers(-20, 20), st.integers(1, 300))
def test_upward_transposition_orders_higher(semis, octave, steps):
    pitch = Pitch.from_semitones_and_octave(semis, octave)
    assert pitch < pitch.transpose(Interval.from_semitones(steps))


def test_ordering_within_octave_uses_pitch_class():
    e4 = Pitch.from_semitones_and_octave(4, 4)
    f4 = Pitch.from_semitones_and_octave(5, 4)
    assert e4 < f4
    assert sorted([f4, e4]) == [e4, f4]


def test_other_temperament_transposition():
    quarter = PitchClass(23, T24)
    moved = quarter.transpose(Interval(3, T24))
    assert moved == PitchClass(2, T24)
    pitch = Pitch(PitchClass(23, T24), 4).transpose(Interval(3, T24))
    assert pitch.octave == 5
    assert pitch.pitch_class.index == 2


def test_temperament_mismatch_raises():
    with pytest.raises(ValueError):
        PitchClass(3, T24).transpose(Interval.from_semitones(1))
    with pytest.raises(ValueError):
        Pitch(PitchClass(3, T24), 4).transpose(Interval.from_semitones(1))


def test_to_semitones_requires_twelve_steps():
    with pytest.raises(ValueError):
        PitchClass(3, T24).to_semitones()


def test_octave_overflow_raises():
    top = Pitch.from_semitones_and_octave(0, 2**15 - 1)
    with pytest.raises(OverflowError):
        top.octave_up()
    with pytest.raises(OverflowError):
        top.transpose(Interval.from_semitones(12))