"""Flow analysis result contract — the shape the reasoning service must return.

The same definitions drive both sides of the contract: ``schema_description()``
is embedded verbatim in the model's system instruction, and ``check_result()``
inspects what comes back.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class NodeKind(str, Enum):
    START = "start"
    STATE = "state"
    CONDITIONAL = "conditional"
    DATA = "data"
    END = "end"


class SuggestionKind(str, Enum):
    TIMEOUT = "timeout"
    ERROR = "error"
    CANCEL = "cancel"
    RETRY = "retry"
    OTHER = "other"


class Confidence(str, Enum):
    """Display-only ordinal. Never used for control flow."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Visual shape → node kind. Part of the instruction text, not enforced here.
SHAPE_KIND_RULES: dict[str, tuple[NodeKind, ...]] = {
    "oval or rounded rectangle (terminator)": (NodeKind.START, NodeKind.END),
    "rectangle (action, screen or step)": (NodeKind.STATE,),
    "diamond or rhombus (decision point)": (NodeKind.CONDITIONAL,),
    "cylinder (data store)": (NodeKind.DATA,),
}

# Target platform key → what the generated snippet should be.
CODE_TARGETS: dict[str, str] = {
    "react": "TypeScript React logic snippet",
    "vue": "Vue 3 Composition API snippet",
    "vanilla": "Plain JS/TS snippet",
}


class _ContractModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class State(_ContractModel):
    id: str
    label: str
    kind: NodeKind = Field(alias="type")
    description: str = ""


class Transition(_ContractModel):
    from_: str = Field(alias="from")
    to: str
    condition: str | None = None  # None = unconditional


class Gap(_ContractModel):
    node: str
    issue: str
    suggestion: str


class Suggestion(_ContractModel):
    title: str
    description: str
    kind: SuggestionKind = Field(alias="type")


class FlowAnalysisResult(_ContractModel):
    title: str
    description: str
    states: list[State] = Field(default_factory=list)
    transitions: list[Transition] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    gaps: list[Gap] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    code_logic: dict[str, str] = Field(default_factory=dict, alias="codeLogic")
    confidence: Confidence
    noise_detected: str | None = Field(default=None, alias="noiseDetected")

    def state_ids(self) -> list[str]:
        return [s.id for s in self.states]


def _choices(enum_cls: type[Enum]) -> str:
    return "|".join(member.value for member in enum_cls)


def schema_description() -> str:
    """Declarative JSON shape of a FlowAnalysisResult, for the model's instructions."""
    shape = {
        "title": "string — inferred flow title",
        "description": "string — 2-3 sentence executive summary",
        "states": [
            {
                "id": "S1",
                "label": "string",
                "type": _choices(NodeKind),
                "description": "string",
            }
        ],
        "transitions": [{"from": "S1", "to": "S2", "condition": "string or null"}],
        "steps": ["string — plain English step 1", "string — step 2"],
        "gaps": [{"node": "string", "issue": "string", "suggestion": "string"}],
        "suggestions": [
            {"title": "string", "description": "string", "type": _choices(SuggestionKind)}
        ],
        "codeLogic": {key: f"string — {desc}" for key, desc in CODE_TARGETS.items()},
        "confidence": _choices(Confidence),
        "noiseDetected": "string or null — describe any ignored visual noise",
    }
    return json.dumps(shape, indent=2, ensure_ascii=False)


def json_schema() -> dict[str, Any]:
    """JSON Schema of the result contract, keyed by wire names."""
    return FlowAnalysisResult.model_json_schema(by_alias=True)


def check_result(payload: Any) -> list[str]:
    """Structural issues in a decoded model response. Never raises.

    Covers field presence and types, enum membership, duplicate state ids and
    transitions whose endpoints name no declared state. An empty list means the
    payload satisfies the contract.
    """
    if not isinstance(payload, dict):
        return [f"expected a JSON object, got {type(payload).__name__}"]

    try:
        result = FlowAnalysisResult.model_validate(payload)
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]

    issues: list[str] = []
    seen: set[str] = set()
    for state_id in result.state_ids():
        if state_id in seen:
            issues.append(f"duplicate state id {state_id!r}")
        seen.add(state_id)

    for i, t in enumerate(result.transitions):
        for end_name, ref in (("from", t.from_), ("to", t.to)):
            if ref not in seen:
                issues.append(f"transitions.{i}.{end_name}: unknown state id {ref!r}")

    return issues
