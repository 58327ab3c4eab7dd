"""Request and response models for the harmonic planner, with JSON encoding."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class TemplateFormat(Enum):
    """Encoding of an inline template document."""

    JSON5 = "json5"
    RON = "ron"


class ModeName(Enum):
    """Key mode as exchanged in payloads."""

    MAJOR = "major"
    MINOR = "minor"


class ExplainMode(Enum):
    """How much explanation the planner captures."""

    NONE = "none"
    BRIEF = "brief"
    DETAILED = "detailed"
    DEBUG = "debug"


# --- field readers -----------------------------------------------------------------


def _mapping(data: object, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


def _required(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field '{key}'") from None


def _as_str(value: object, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _as_uint(value: object, key: str, bits: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    if not 0 <= value < 2**bits:
        raise ValueError(f"field '{key}' is out of range for a {bits}-bit unsigned integer")
    return value


def _as_float(value: object, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field '{key}' must be a number")
    return float(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    return _as_str(_required(data, key), key)


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else _as_str(value, key)


def _uint(data: Mapping[str, Any], key: str, bits: int) -> int:
    return _as_uint(_required(data, key), key, bits)


def _opt_uint(data: Mapping[str, Any], key: str, bits: int) -> int | None:
    value = data.get(key)
    return None if value is None else _as_uint(value, key, bits)


def _float(data: Mapping[str, Any], key: str) -> float:
    return _as_float(_required(data, key), key)


def _opt_float(data: Mapping[str, Any], key: str) -> float | None:
    value = data.get(key)
    return None if value is None else _as_float(value, key)


def _str_list(data: Mapping[str, Any], key: str, *, required: bool = False) -> list[str]:
    value = _required(data, key) if required else data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list")
    return [_as_str(item, key) for item in value]


def _enum(enum_cls: type[Enum], data: Mapping[str, Any], key: str) -> Any:
    value = _required(data, key)
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"unknown value {value!r} for field '{key}'") from None


def _list_of(data: Mapping[str, Any], key: str, reader: Any) -> list[Any]:
    value = _required(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list")
    return [reader(item) for item in value]


def _without_none(pairs: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in pairs.items() if value is not None}


# --- template selection -------------------------------------------------------------


@dataclass(kw_only=True)
class BuiltinTemplate:
    """Select a template bundled with the planner."""

    id: str


@dataclass(kw_only=True)
class RegistryTemplate:
    """Select a user template stored in the registry."""

    id: str


@dataclass(kw_only=True)
class InlineTemplate:
    """Provide a template document inline."""

    format: TemplateFormat
    data: str


TemplateSelector = Union[BuiltinTemplate, RegistryTemplate, InlineTemplate]


def selector_to_dict(selector: TemplateSelector) -> dict[str, Any]:
    """Encode a selector as an object tagged by 'kind'."""
    if isinstance(selector, BuiltinTemplate):
        return {"kind": "builtin", "id": selector.id}
    if isinstance(selector, RegistryTemplate):
        return {"kind": "registry", "id": selector.id}
    if isinstance(selector, InlineTemplate):
        return {"kind": "inline", "format": selector.format.value, "data": selector.data}
    raise TypeError(f"not a template selector: {selector!r}")


def selector_from_dict(data: Mapping[str, Any]) -> TemplateSelector:
    """Decode a selector object tagged by 'kind'."""
    data = _mapping(data, "template selector")
    kind = _str(data, "kind")
    if kind == "builtin":
        return BuiltinTemplate(id=_str(data, "id"))
    if kind == "registry":
        return RegistryTemplate(id=_str(data, "id"))
    if kind == "inline":
        return InlineTemplate(
            format=_enum(TemplateFormat, data, "format"), data=_str(data, "data")
        )
    raise ValueError(f"unknown template selector kind {kind!r}")


# --- shared parts -------------------------------------------------------------------


@dataclass(kw_only=True)
class TemplateSourceDescriptor:
    """How a template was resolved."""

    builtin: str | None = None
    registry_id: str | None = None
    path: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _without_none(
            {"builtin": self.builtin, "registry_id": self.registry_id, "path": self.path}
        )

    @classmethod
    def _from_dict(cls, data: object) -> TemplateSourceDescriptor:
        data = _mapping(data, "source")
        return cls(
            builtin=_opt_str(data, "builtin"),
            registry_id=_opt_str(data, "registry_id"),
            path=_opt_str(data, "path"),
        )


@dataclass(kw_only=True)
class TemplateDescriptor:
    """The template a plan was made from."""

    id: str
    version: int
    bars: int
    source: TemplateSourceDescriptor

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "bars": self.bars,
            "source": self.source._to_dict(),
        }

    @classmethod
    def _from_dict(cls, data: object) -> TemplateDescriptor:
        data = _mapping(data, "template")
        return cls(
            id=_str(data, "id"),
            version=_uint(data, "version", 16),
            bars=_uint(data, "bars", 16),
            source=TemplateSourceDescriptor._from_dict(_required(data, "source")),
        )


@dataclass(kw_only=True)
class KeySpecification:
    """A key: tonic label and mode."""

    tonic: str
    mode: ModeName

    def _to_dict(self) -> dict[str, Any]:
        return {"tonic": self.tonic, "mode": self.mode.value}

    @classmethod
    def _from_dict(cls, data: object) -> KeySpecification:
        data = _mapping(data, "key")
        return cls(tonic=_str(data, "tonic"), mode=_enum(ModeName, data, "mode"))


_OVERRIDE_INTS = ("beam_width", "max_depth")
_OVERRIDE_FLOATS = (
    "risk_level",
    "reharm_depth",
    "voice_leading_strictness",
    "modulation_aggressiveness",
    "max_chord_complexity",
)


@dataclass(kw_only=True)
class StyleOverrides:
    """Optional replacements for individual style knobs."""

    beam_width: int | None = None
    max_depth: int | None = None
    risk_level: float | None = None
    reharm_depth: float | None = None
    voice_leading_strictness: float | None = None
    modulation_aggressiveness: float | None = None
    max_chord_complexity: float | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _without_none(
            {name: getattr(self, name) for name in _OVERRIDE_INTS + _OVERRIDE_FLOATS}
        )

    @classmethod
    def _from_dict(cls, data: object) -> StyleOverrides:
        data = _mapping(data, "overrides")
        values: dict[str, Any] = {name: _opt_uint(data, name, 16) for name in _OVERRIDE_INTS}
        values.update({name: _opt_float(data, name) for name in _OVERRIDE_FLOATS})
        return cls(**values)


@dataclass(kw_only=True)
class StyleSpecification:
    """A style preset with optional overrides."""

    preset: str
    overrides: StyleOverrides | None = None

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"preset": self.preset}
        if self.overrides is not None:
            result["overrides"] = self.overrides._to_dict()
        return result

    @classmethod
    def _from_dict(cls, data: object) -> StyleSpecification:
        data = _mapping(data, "style")
        overrides = data.get("overrides")
        return cls(
            preset=_str(data, "preset"),
            overrides=None if overrides is None else StyleOverrides._from_dict(overrides),
        )


@dataclass(kw_only=True)
class StateSnapshot:
    """The planner's state for one bar."""

    bar: int
    scale_degree: int
    function: str
    chord: str
    tension: float
    cadence: str
    phrase: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "bar": self.bar,
                "scale_degree": self.scale_degree,
                "function": self.function,
                "chord": self.chord,
                "tension": self.tension,
                "cadence": self.cadence,
                "phrase": self.phrase,
            }
        )

    @classmethod
    def _from_dict(cls, data: object) -> StateSnapshot:
        data = _mapping(data, "state")
        return cls(
            bar=_uint(data, "bar", 16),
            scale_degree=_uint(data, "scale_degree", 8),
            function=_str(data, "function"),
            chord=_str(data, "chord"),
            tension=_float(data, "tension"),
            cadence=_str(data, "cadence"),
            phrase=_opt_str(data, "phrase"),
        )


@dataclass(kw_only=True)
class BarSummary:
    """Explanation summary for one bar."""

    bar: int
    phrase: str | None = None
    function: str
    chord: str
    tension_target: float
    tension_actual: float
    reharm_risk: float
    cadence: str
    notes: list[str] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result = _without_none(
            {
                "bar": self.bar,
                "phrase": self.phrase,
                "function": self.function,
                "chord": self.chord,
                "tension_target": self.tension_target,
                "tension_actual": self.tension_actual,
                "reharm_risk": self.reharm_risk,
                "cadence": self.cadence,
            }
        )
        if self.notes:
            result["notes"] = list(self.notes)
        return result

    @classmethod
    def _from_dict(cls, data: object) -> BarSummary:
        data = _mapping(data, "bar summary")
        return cls(
            bar=_uint(data, "bar", 16),
            phrase=_opt_str(data, "phrase"),
            function=_str(data, "function"),
            chord=_str(data, "chord"),
            tension_target=_float(data, "tension_target"),
            tension_actual=_float(data, "tension_actual"),
            reharm_risk=_float(data, "reharm_risk"),
            cadence=_str(data, "cadence"),
            notes=_str_list(data, "notes"),
        )


@dataclass(kw_only=True)
class PhraseSummary:
    """Cadences and highlights within one phrase."""

    phrase: str
    start_bar: int
    end_bar: int
    cadences: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "phrase": self.phrase,
            "start_bar": self.start_bar,
            "end_bar": self.end_bar,
        }
        if self.cadences:
            result["cadences"] = list(self.cadences)
        if self.highlights:
            result["highlights"] = list(self.highlights)
        return result

    @classmethod
    def _from_dict(cls, data: object) -> PhraseSummary:
        data = _mapping(data, "phrase summary")
        return cls(
            phrase=_str(data, "phrase"),
            start_bar=_uint(data, "start_bar", 16),
            end_bar=_uint(data, "end_bar", 16),
            cadences=_str_list(data, "cadences"),
            highlights=_str_list(data, "highlights"),
        )


@dataclass(kw_only=True)
class CadenceSummary:
    """A cadence and where it falls."""

    bar: int
    phrase: str | None = None
    cadence: str
    expected_function: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "bar": self.bar,
                "phrase": self.phrase,
                "cadence": self.cadence,
                "expected_function": self.expected_function,
            }
        )

    @classmethod
    def _from_dict(cls, data: object) -> CadenceSummary:
        data = _mapping(data, "cadence summary")
        return cls(
            bar=_uint(data, "bar", 16),
            phrase=_opt_str(data, "phrase"),
            cadence=_str(data, "cadence"),
            expected_function=_opt_str(data, "expected_function"),
        )


# --- top-level payloads -------------------------------------------------------------


@dataclass(kw_only=True)
class PlanRequest:
    """A request to run the planner."""

    template: TemplateSelector
    key: KeySpecification
    style: StyleSpecification
    explain: ExplainMode

    def to_dict(self) -> dict[str, Any]:
        """Encode as JSON-ready data."""
        return {
            "template": selector_to_dict(self.template),
            "key": self.key._to_dict(),
            "style": self.style._to_dict(),
            "explain": self.explain.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlanRequest:
        """Decode from JSON-ready data; raises ValueError on malformed input."""
        data = _mapping(data, "plan request")
        return cls(
            template=selector_from_dict(_required(data, "template")),
            key=KeySpecification._from_dict(_required(data, "key")),
            style=StyleSpecification._from_dict(_required(data, "style")),
            explain=_enum(ExplainMode, data, "explain"),
        )

    def to_json(self) -> str:
        """Encode as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> PlanRequest:
        """Decode from JSON text."""
        return cls.from_dict(json.loads(text))


@dataclass(kw_only=True)
class PlanResponse:
    """The planner's result."""

    template: TemplateDescriptor
    key: KeySpecification
    style: str
    explain_mode: ExplainMode
    diagnostics: list[str] = field(default_factory=list)
    states: list[StateSnapshot] = field(default_factory=list)
    bars: list[BarSummary] = field(default_factory=list)
    phrases: list[PhraseSummary] = field(default_factory=list)
    cadences: list[CadenceSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Encode as JSON-ready data."""
        return {
            "template": self.template._to_dict(),
            "key": self.key._to_dict(),
            "style": self.style,
            "explain_mode": self.explain_mode.value,
            "diagnostics": list(self.diagnostics),
            "states": [state._to_dict() for state in self.states],
            "bars": [bar._to_dict() for bar in self.bars],
            "phrases": [phrase._to_dict() for phrase in self.phrases],
            "cadences": [cadence._to_dict() for cadence in self.cadences],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlanResponse:
        """Decode from JSON-ready data; raises ValueError on malformed input."""
        data = _mapping(data, "plan response")
        return cls(
            template=TemplateDescriptor._from_dict(_required(data, "template")),
            key=KeySpecification._from_dict(_required(data, "key")),
            style=_str(data, "style"),
            explain_mode=_enum(ExplainMode, data, "explain_mode"),
            diagnostics=_str_list(data, "diagnostics", required=True),
            states=_list_of(data, "states", StateSnapshot._from_dict),
            bars=_list_of(data, "bars", BarSummary._from_dict),
            phrases=_list_of(data, "phrases", PhraseSummary._from_dict),
            cadences=_list_of(data, "cadences", CadenceSummary._from_dict),
        )

    def to_json(self) -> str:
        """Encode as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> PlanResponse:
        """Decode from JSON text."""
        return cls.from_dict(json.loads(text))