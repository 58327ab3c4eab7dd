import pytest
from hypothesis import given
from hypothesis import strategies as st

from musicstack.theory.pitch import PitchClass
from musicstack.theory.scale import Scale


def pcs(indices):
    return tuple(PitchClass.from_semitones(i) for i in indices)


def test_major_scale_contains_expected_degrees():
    scale = Scale.major(PitchClass.from_semitones(0))
    expected = pcs([0, 2, 4, 5, 7, 9, 11])
    assert scale.degrees == expected
    for degree, pc in enumerate(expected, start=1):
        assert pc in scale
        assert scale.degree_of(pc) == degree
    assert scale.degree_of(PitchClass.from_semitones(1)) is None
    assert PitchClass.from_semitones(1) not in scale


def test_natural_minor_matches_mode_of_major():
    c_major = Scale.major(PitchClass.from_semitones(0))
    a_minor = Scale.natural_minor(PitchClass.from_semitones(9))
    mode = c_major.mode(6)
    assert mode is not None
    assert a_minor.degrees == mode.degrees


def test_dorian_factory_matches_step_pattern():
    d = PitchClass.from_semitones(2)
    assert Scale.dorian(d).degrees == Scale.from_step_pattern(d, [2, 1, 2, 2, 2, 1, 2]).degrees


def test_mode_generation_rotates_degrees():
    lydian = Scale.lydian(PitchClass.from_semitones(5))
    start_degree = 3
    mode = lydian.mode(start_degree)
    assert mode.degrees[0] == lydian.degrees[2]
    invert_shift = len(lydian) - (start_degree - 1)
    recomposed = mode.mode(invert_shift + 1)
    assert recomposed.degrees == lydian.degrees


@pytest.mark.parametrize("degree", [0, 8, -1])
def test_mode_out_of_range_is_none(degree):
    assert Scale.major(PitchClass.from_semitones(0)).mode(degree) is None


def test_duplicate_pitch_classes_are_skipped():
    root = PitchClass.from_semitones(0)
    assert Scale.from_step_pattern(root, [12]).degrees == (root,)


@pytest.mark.parametrize(
    "factory",
    [
        Scale.major,
        Scale.natural_minor,
        Scale.dorian,
        Scale.phrygian,
        Scale.lydian,
        Scale.mixolydian,
        Scale.locrian,
    ],
)
@given(root=st.integers(0, 11))
def test_heptatonic_factories_have_seven_distinct_degrees(factory, root):
    scale = factory(PitchClass.from_semitones(root))
    assert len(scale) == 7
    assert len(set(scale.degrees)) == 7
    assert scale.degree_of(PitchClass.from_semitones(root)) == 1


@given(st.integers(0, 11), st.integers(1, 7))
def test_modes_of_major_share_pitch_content(root, degree):
    major = Scale.major(PitchClass.from_semitones(root))
    mode = major.mode(degree)
    assert set(mode) == set(major)
    assert mode.degrees[0] == major.degrees[degree - 1]


def test_church_modes_are_modes_of_c_major():
    c_major = Scale.major(PitchClass.from_semitones(0))
    assert Scale.dorian(PitchClass.from_semitones(2)) == c_major.mode(2)
    assert Scale.phrygian(PitchClass.from_semitones(4)) == c_major.mode(3)
    assert Scale.lydian(PitchClass.from_semitones(5)) == c_major.mode(4)
    assert Scale.mixolydian(PitchClass.from_semitones(7)) == c_major.mode(5)
    assert Scale.locrian(PitchClass.from_semitones(11)) == c_major.mode(7)