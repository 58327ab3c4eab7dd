import json

import pytest

from musicstack.api.plan import (
    BarSummary,
    BuiltinTemplate,
    CadenceSummary,
    ExplainMode,
    InlineTemplate,
    KeySpecification,
    ModeName,
    PhraseSummary,
    PlanRequest,
    PlanResponse,
    RegistryTemplate,
    StateSnapshot,
    StyleOverrides,
    StyleSpecification,
    TemplateDescriptor,
    TemplateFormat,
    TemplateSourceDescriptor,
    selector_from_dict,
    selector_to_dict,
)


def make_request():
    return PlanRequest(
        template=BuiltinTemplate(id="jazz_aaba_v1"),
        key=KeySpecification(tonic="C", mode=ModeName.MAJOR),
        style=StyleSpecification(
            preset="balanced",
            overrides=StyleOverrides(
                beam_width=8,
                max_depth=18,
                risk_level=0.6,
                reharm_depth=None,
                voice_leading_strictness=None,
                modulation_aggressiveness=0.5,
                max_chord_complexity=0.7,
            ),
        ),
        explain=ExplainMode.DETAILED,
    )


def make_response():
    return PlanResponse(
        template=TemplateDescriptor(
            id="jazz_aaba_v1",
            version=1,
            bars=32,
            source=TemplateSourceDescriptor(builtin="jazz_aaba_v1"),
        ),
        key=KeySpecification(tonic="C", mode=ModeName.MAJOR),
        style="balanced",
        explain_mode=ExplainMode.BRIEF,
        diagnostics=["tension fallback"],
        states=[
            StateSnapshot(
                bar=1,
                scale_degree=1,
                function="Tonic",
                chord="Cmaj7",
                tension=0.1,
                cadence="none",
                phrase="A1",
            )
        ],
        bars=[
            BarSummary(
                bar=1,
                phrase="A1",
                function="Tonic",
                chord="Cmaj7",
                tension_target=0.1,
                tension_actual=0.12,
                reharm_risk=0.2,
                cadence="none",
                notes=["expected_function:tonic"],
            )
        ],
        phrases=[
            PhraseSummary(
                phrase="A1",
                start_bar=1,
                end_bar=8,
                cadences=["half"],
                highlights=["modulation:IV"],
            )
        ],
        cadences=[
            CadenceSummary(bar=8, phrase="A1", cadence="half", expected_function="Dominant")
        ],
    )


def test_plan_request_round_trips():
    request = make_request()
    assert PlanRequest.from_json(request.to_json()) == request


def test_plan_response_round_trips():
    response = make_response()
    value = response.to_dict()
    assert value["template"]["id"] == "jazz_aaba_v1"
    assert PlanResponse.from_dict(value) == response
    assert PlanResponse.from_json(response.to_json()) == response


def test_request_encodes_enums_as_snake_case_strings():
    data = make_request().to_dict()
    assert data["explain"] == "detailed"
    assert data["key"]["mode"] == "major"
    assert data["template"] == {"kind": "builtin", "id": "jazz_aaba_v1"}


def test_unset_overrides_are_omitted():
    overrides = make_request().to_dict()["style"]["overrides"]
    assert "reharm_depth" not in overrides
    assert "voice_leading_strictness" not in overrides
    assert overrides["beam_width"] == 8


def test_style_without_overrides_omits_key_and_decodes_back():
    spec = StyleSpecification(preset="balanced")
    request = PlanRequest(
        template=RegistryTemplate(id="mine"),
        key=KeySpecification(tonic="F#", mode=ModeName.MINOR),
        style=spec,
        explain=ExplainMode.NONE,
    )
    data = request.to_dict()
    assert "overrides" not in data["style"]
    assert PlanRequest.from_dict(data) == request


def test_source_descriptor_skips_none_fields():
    data = make_response().to_dict()
    assert data["template"]["source"] == {"builtin": "jazz_aaba_v1"}


def test_empty_vectors_are_skipped_in_summaries():
    bar = BarSummary(
        bar=2,
        function="Dominant",
        chord="G7",
        tension_target=0.5,
        tension_actual=0.5,
        reharm_risk=0.0,
        cadence="half",
    )
    phrase = PhraseSummary(phrase="B", start_bar=9, end_bar=16)
    response = make_response()
    response.bars = [bar]
    response.phrases = [phrase]
    data = response.to_dict()
    assert "notes" not in data["bars"][0]
    assert "phrase" not in data["bars"][0]
    assert set(data["phrases"][0]) == {"phrase", "start_bar", "end_bar"}
    decoded = PlanResponse.from_dict(data)
    assert decoded.bars[0].notes == []
    assert decoded.phrases[0].highlights == []


@pytest.mark.parametrize(
    "selector",
    [
        BuiltinTemplate(id="a"),
        RegistryTemplate(id="b"),
        InlineTemplate(format=TemplateFormat.RON, data="(id: \"x\")"),
        InlineTemplate(format=TemplateFormat.JSON5, data="{id: 'x'}"),
    ],
)
def test_selector_round_trip(selector):
    assert selector_from_dict(selector_to_dict(selector)) == selector


def test_inline_selector_wire_form():
    data = selector_to_dict(InlineTemplate(format=TemplateFormat.JSON5, data="{}"))
    assert data == {"kind": "inline", "format": "json5", "data": "{}"}


def test_unknown_selector_kind_rejected():
    with pytest.raises(ValueError):
        selector_from_dict({"kind": "remote", "id": "x"})


def test_missing_field_rejected():
    data = make_request().to_dict()
    del data["explain"]
    with pytest.raises(ValueError):
        PlanRequest.from_dict(data)


def test_unknown_enum_value_rejected():
    data = make_request().to_dict()
    data["key"]["mode"] = "dorian"
    with pytest.raises(ValueError):
        PlanRequest.from_dict(data)


def test_out_of_range_integer_rejected():
    data = make_response().to_dict()
    data["template"]["bars"] = 70000
    with pytest.raises(ValueError):
        PlanResponse.from_dict(data)


def test_wrong_type_rejected():
    data = make_response().to_dict()
    data["states"][0]["tension"] = "high"
    with pytest.raises(ValueError):
        PlanResponse.from_dict(data)


def test_to_json_is_valid_json_matching_dict():
    response = make_response()
    assert json.loads(response.to_json()) == response.to_dict()