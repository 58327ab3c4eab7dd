# musicstack

Building blocks for working with music in Python:

- **`musicstack.theory`**: pitch classes and pitches, intervals, diatonic
  scales and their modes, chords built from stacked intervals, keys and
  harmonic functions, plus helpers for parsing tonic names such as `F#` or
  `Bb` and a small `TemplateLocator` record.
- **`musicstack.rhythm`**: beats, time points and spans, meters
  (time signatures), tempos with seconds/beats conversion, and time grids of
  measures, beats and subdivisions.
- **`musicstack.notation`**: articulations, ornaments, dynamic marks
  and ramps, glyph identifiers, stem directions and layout geometry.
- **`musicstack.api`**: request and response records for a harmonic
  section planner, with JSON round-tripping.

The package depends only on the standard library. Values are immutable
dataclasses and enums; invalid input raises `ValueError`.

## Theory

```python
from musicstack.theory.pitch import Pitch, PitchClass
from musicstack.theory.interval import Interval
from musicstack.theory.scale import Scale
from musicstack.theory.chord import Chord, ExtendedKind
from musicstack.theory.key import Key
from musicstack.theory.function import FunctionKind

c = PitchClass.from_semitones(0)
g = c.transpose(Interval.from_semitones(7))
assert g.to_semitones() == 7

c4 = Pitch.from_semitones_and_octave(0, 4)
d5 = c4.transpose(Interval.from_semitones(14))
assert (d5.semitone(), d5.octave) == (2, 5)
assert c4 < c4.octave_up()

scale = Scale.major(c)
assert scale.degree_of(g) == 5
assert len(scale) == 7
assert Scale.natural_minor(PitchClass.from_semitones(9)) == scale.mode(6)

dominant = Chord.dominant_seventh(g)
assert g in dominant
assert len(dominant) == 4
ninth = Chord.extended(c, ExtendedKind.MAJOR9)

a_minor = Key.minor(PitchClass.from_semitones(9))
fifth_degree = a_minor.function_for_degree(5)
assert fifth_degree.kind is FunctionKind.DOMINANT
assert fifth_degree.pitch_class.to_semitones() == 4
```

Intervals add, subtract, invert within the octave and classify themselves:

```python
from musicstack.theory.interval import GenericInterval, IntervalQuality

fifth = Interval.from_semitones(7)
assert fifth.invert_octave().to_semitones() == 5
assert fifth.classify() == (GenericInterval.FIFTH, IntervalQuality.PERFECT)
```

Pitch classes, intervals and scales carry a `Temperament` (12-TET by default);
mixing temperaments raises `ValueError`.

Tonic names can be parsed and rendered back:

```python
from musicstack.theory.key import Mode
from musicstack.theory.names import (
    format_key_label,
    parse_key,
    parse_pitch_class,
    pitch_class_label,
)

b_flat = parse_pitch_class("Bb")
assert pitch_class_label(b_flat) == "Bb"
assert format_key_label(parse_key("F#", Mode.MAJOR)) == "F# major"
assert format_key_label(a_minor) == "A minor"
```

`TemplateLocator.builtin(...)` and `TemplateLocator.file(...)` record where a
template came from; `describe()` gives strings such as `builtin:jazz_aaba_v1`.

## Rhythm

Time is measured in quarter-note beats.

```python
from musicstack.rhythm.meter import Meter
from musicstack.rhythm.tempo import Tempo
from musicstack.rhythm.timespan import TimePoint, TimeSpan
from musicstack.rhythm.timegrid import GridConfig

assert Meter.SEVEN_EIGHT.beats_per_bar() == 3.5

tempo = Tempo(90.0)
seconds = tempo.seconds_for_span(TimeSpan(3.0))   # 2.0
span = tempo.span_for_seconds(seconds)            # back to 3 beats
assert tempo.seconds_per_bar(Meter.FOUR_FOUR) == 4 * tempo.seconds_per_beat()

grid = (
    GridConfig(TimePoint(0.0), Meter.FOUR_FOUR)
    .with_bars(2)
    .with_subdivisions_per_beat(2)
    .build()
)
assert len(grid.measures) == 3
assert len(grid.beats) == 9
assert len(grid.subdivisions) == 17
```

Beats, points and spans never go negative: subtracting past zero raises
`ValueError`, while `checked_sub` and `checked_sub_span` return `None`
instead. Subtracting one `TimePoint` from another gives a `TimeSpan`.

## Notation

```python
from musicstack.notation.articulation import ArticulationKind, OrnamentKind
from musicstack.notation.dynamics import DynamicMark, ramp
from musicstack.notation.geometry import LayoutBox, LayoutPosition
from musicstack.notation.glyph import GlyphId, StemDirection

assert DynamicMark.MF.label() == "mf"
assert DynamicMark.from_intensity(4) is DynamicMark.MF

points = ramp(DynamicMark.P, DynamicMark.FF, 4.0, 3)
assert [p.offset for p in points] == [0.0, 2.0, 4.0]
assert points[-1].mark is DynamicMark.FF

a = LayoutBox(0.0, 0.0, 10.0, 5.0)
b = LayoutBox(5.0, 2.0, 10.0, 5.0)
assert a.intersection(b) == LayoutBox(5.0, 2.0, 5.0, 3.0)
assert a.union(b) == LayoutBox(0.0, 0.0, 15.0, 7.0)
assert a.contains(LayoutPosition(1.0, 1.0))

assert str(GlyphId.from_codepoint(0xE0A4)) == "U+E0A4"
assert StemDirection.UP.flipped() is StemDirection.DOWN
```

`ArticulationKind` and `OrnamentKind` are integer enums whose values give a
stable canonical order.

## Planner records

`PlanRequest` and `PlanResponse` convert to and from plain dictionaries
(`to_dict` / `from_dict`) and compact JSON text (`to_json` / `from_json`);
optional fields that are unset, and empty note/cadence/highlight lists in the
summaries, are left out of the output. Malformed input raises `ValueError`.

```python
from musicstack.api.plan import (
    BuiltinTemplate,
    ExplainMode,
    KeySpecification,
    ModeName,
    PlanRequest,
    StyleOverrides,
    StyleSpecification,
)

request = PlanRequest(
    template=BuiltinTemplate(id="jazz_aaba_v1"),
    key=KeySpecification(tonic="C", mode=ModeName.MAJOR),
    style=StyleSpecification(preset="balanced", overrides=StyleOverrides(beam_width=8)),
    explain=ExplainMode.DETAILED,
)
assert PlanRequest.from_json(request.to_json()) == request
```

The template selector in a request is one of `BuiltinTemplate`,
`RegistryTemplate` or `InlineTemplate`, written with a `kind` tag
(`builtin`, `registry`, `inline`); `selector_to_dict` and
`selector_from_dict` convert a selector on its own.

## What is not included

The package provides the data records a harmonic planner exchanges, but not
the planner itself: it does not plan sections, ship or load templates, store
a local template registry, or offer a command-line tool.