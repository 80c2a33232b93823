"""Instruction prompts for flowchart analysis — schema embedded from the result contract."""

from __future__ import annotations

from flowdoc.models.schema import SHAPE_KIND_RULES, schema_description


def _shape_rules() -> str:
    lines = []
    for shape, kinds in SHAPE_KIND_RULES.items():
        lines.append(f"   - {shape} → " + " / ".join(f'"{k.value}"' for k in kinds))
    return "\n".join(lines)


_GAP_HEURISTICS = """   - Dead-end paths with no error handling
   - Missing "Cancel" or "Timeout" branches
   - Loops without exit conditions
   - Undefined states between conditionals"""

_SYSTEM_TEMPLATE = """You are a Senior Technical Architect specializing in flowchart analysis and technical documentation.

Analyze the provided flowchart image with surgical precision:

1. **Node Mapping** — Map every visual node to a state "type":
{shape_rules}

2. **Gap Detection** — Identify missing edge cases:
{gap_heuristics}
   List each one in "gaps" with the affected node, the issue, and a concrete fix.

3. **Constructive Suggestions** — If the flow is incomplete or ambiguous, DO NOT fail. Instead provide best-effort output: explain what the missing piece likely is in "suggestions", with a suggested implementation.

4. **Output Format** — Respond ONLY with valid JSON matching this schema exactly:
{schema}

Ignore visual noise: grid lines, cursor artifacts, annotation overlays, watermarks.
If confidence is low, still provide best-effort output with an honest "confidence" and populated "suggestions"."""

SYSTEM_PROMPT = _SYSTEM_TEMPLATE.format(
    shape_rules=_shape_rules(),
    gap_heuristics=_GAP_HEURISTICS,
    schema=schema_description(),
)

USER_INSTRUCTION = "Analyze this flowchart. Return only valid JSON per the schema."

_TEMPLATES = {
    "system": SYSTEM_PROMPT,
    "user": USER_INSTRUCTION,
}


def get_all_templates() -> dict[str, str]:
    """Return all prompt texts (for debugging / inspection)."""
    return dict(_TEMPLATES)
