"""Tests for the flow analysis result contract."""

from __future__ import annotations

import json

from flowdoc.models.schema import (
    CODE_TARGETS,
    SHAPE_KIND_RULES,
    Confidence,
    FlowAnalysisResult,
    NodeKind,
    SuggestionKind,
    check_result,
    json_schema,
    schema_description,
)


class TestEnums:
    def test_node_kinds(self):
        assert [k.value for k in NodeKind] == ["start", "state", "conditional", "data", "end"]

    def test_suggestion_kinds(self):
        assert [k.value for k in SuggestionKind] == ["timeout", "error", "cancel", "retry", "other"]

    def test_confidence_levels(self):
        assert [c.value for c in Confidence] == ["high", "medium", "low"]

    def test_shape_rules_cover_every_node_kind(self):
        covered = {kind for kinds in SHAPE_KIND_RULES.values() for kind in kinds}
        assert covered == set(NodeKind)


class TestSchemaDescription:
    def test_is_json_with_every_field(self):
        shape = json.loads(schema_description())
        assert list(shape) == [
            "title", "description", "states", "transitions", "steps", "gaps",
            "suggestions", "codeLogic", "confidence", "noiseDetected",
        ]

    def test_enums_spelled_out(self):
        shape = json.loads(schema_description())
        assert shape["states"][0]["type"] == "start|state|conditional|data|end"
        assert shape["suggestions"][0]["type"] == "timeout|error|cancel|retry|other"
        assert shape["confidence"] == "high|medium|low"

    def test_code_targets(self):
        shape = json.loads(schema_description())
        assert set(shape["codeLogic"]) == set(CODE_TARGETS) == {"react", "vue", "vanilla"}


class TestModels:
    def test_parse_by_wire_names(self, login_result):
        result = FlowAnalysisResult.model_validate(login_result)
        assert result.states[2].kind is NodeKind.CONDITIONAL
        assert result.transitions[0].from_ == "S1"
        assert result.transitions[0].condition is None
        assert result.suggestions[0].kind is SuggestionKind.TIMEOUT
        assert result.code_logic["vue"] == "const state = ref('S1');"
        assert result.noise_detected == "grid lines"

    def test_dump_by_alias_round_trips(self, login_result):
        result = FlowAnalysisResult.model_validate(login_result)
        assert result.model_dump(mode="json", by_alias=True) == login_result

    def test_json_schema_uses_wire_names(self):
        schema = json_schema()
        assert "codeLogic" in schema["properties"]
        assert "noiseDetected" in schema["properties"]
        assert "confidence" in schema["required"]


class TestCheckResult:
    def test_well_formed(self, login_result):
        assert check_result(login_result) == []

    def test_not_an_object(self):
        issues = check_result(["S1", "S2"])
        assert issues == ["expected a JSON object, got list"]

    def test_missing_required_field(self, login_result):
        del login_result["confidence"]
        issues = check_result(login_result)
        assert any(issue.startswith("confidence:") for issue in issues)

    def test_out_of_enum_values(self, login_result):
        login_result["confidence"] = "certain"
        login_result["states"][0]["type"] = "hexagon"
        issues = check_result(login_result)
        assert any(issue.startswith("confidence:") for issue in issues)
        assert any(issue.startswith("states.0.type:") for issue in issues)

    def test_dangling_transition(self, login_result):
        login_result["transitions"].append({"from": "S5", "to": "S9", "condition": None})
        assert check_result(login_result) == ["transitions.5.to: unknown state id 'S9'"]

    def test_duplicate_state_id(self, login_result):
        login_result["states"][4]["id"] = "S4"
        issues = check_result(login_result)
        assert "duplicate state id 'S4'" in issues
