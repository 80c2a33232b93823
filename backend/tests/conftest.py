"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from flowdoc.canvas.host import CanvasHost, SelectionListener
from flowdoc.config import Settings
from flowdoc.models.canvas import CanvasNode, ExportSettings


# A well-formed result, as the reasoning service would return it
LOGIN_FLOW_RESULT: dict[str, Any] = {
    "title": "User Login",
    "description": "Credentials are checked and the user lands on the dashboard. Failed attempts loop back to the form.",
    "states": [
        {"id": "S1", "label": "Start", "type": "start", "description": "User opens the app"},
        {"id": "S2", "label": "Login form", "type": "state", "description": "Email and password"},
        {"id": "S3", "label": "Valid?", "type": "conditional", "description": "Check credentials"},
        {"id": "S4", "label": "Users DB", "type": "data", "description": "Credential store"},
        {"id": "S5", "label": "Dashboard", "type": "end", "description": "Signed in"},
    ],
    "transitions": [
        {"from": "S1", "to": "S2", "condition": None},
        {"from": "S2", "to": "S3", "condition": None},
        {"from": "S3", "to": "S4", "condition": "lookup"},
        {"from": "S3", "to": "S5", "condition": "valid"},
        {"from": "S3", "to": "S2", "condition": "invalid"},
    ],
    "steps": ["Open the app", "Enter credentials", "Submit", "Land on dashboard"],
    "gaps": [
        {"node": "S3", "issue": "Retry loop has no limit", "suggestion": "Lock the account after 5 attempts"},
    ],
    "suggestions": [
        {"title": "Login timeout", "description": "Abort the credential check after 10s", "type": "timeout"},
    ],
    "codeLogic": {
        "react": "const [state, setState] = useState('S1');",
        "vue": "const state = ref('S1');",
        "vanilla": "let state = 'S1';",
    },
    "confidence": "high",
    "noiseDetected": "grid lines",
}

# 1×1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


def chat_completion(content: Any) -> dict[str, Any]:
    """OpenAI-compatible chat completions envelope around ``content``."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
    }


class FakeCanvasHost(CanvasHost):
    """In-memory canvas host. Records every call the coordinators make."""

    def __init__(
        self,
        selection: list[CanvasNode] | None = None,
        *,
        export_error: Exception | None = None,
        save_error: Exception | None = None,
    ) -> None:
        self.selection = list(selection or [])
        self.export_error = export_error
        self.save_error = save_error
        self.exports: list[tuple[str, ExportSettings]] = []
        self.versions: list[tuple[str, str]] = []
        self.notifications: list[tuple[str, int]] = []
        self.posted: list[dict[str, Any]] = []
        self.listeners: list[SelectionListener] = []
        self.closed = False

    def get_selection(self) -> list[CanvasNode]:
        return list(self.selection)

    async def export_node(self, node: CanvasNode, settings: ExportSettings) -> bytes:
        self.exports.append((node.id, settings))
        if self.export_error:
            raise self.export_error
        return PNG_BYTES

    async def export_page(self, settings: ExportSettings) -> bytes:
        self.exports.append(("<page>", settings))
        if self.export_error:
            raise self.export_error
        return PNG_BYTES

    async def save_version(self, label: str, description: str) -> None:
        if self.save_error:
            raise self.save_error
        self.versions.append((label, description))

    def notify(self, text: str, timeout_ms: int) -> None:
        self.notifications.append((text, timeout_ms))

    def on_selection_change(self, listener: SelectionListener) -> None:
        self.listeners.append(listener)

    def post_message(self, message: dict[str, Any]) -> None:
        self.posted.append(message)

    def close(self) -> None:
        self.closed = True

    def select(self, nodes: list[CanvasNode]) -> None:
        """Simulate the user changing the selection."""
        self.selection = list(nodes)
        for listener in self.listeners:
            listener(self.get_selection())


def make_nodes(count: int) -> list[CanvasNode]:
    return [CanvasNode(id=f"1:{i}", name=f"Frame {i}", type="FRAME") for i in range(count)]


def mock_transport(status_code: int, body: str | dict | None = None, calls: list | None = None) -> httpx.MockTransport:
    """Reasoning service stand-in answering every request with one fixed reply."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if isinstance(body, dict):
            return httpx.Response(status_code, text=json.dumps(body))
        return httpx.Response(status_code, text=body or "")

    return httpx.MockTransport(handler)


@pytest.fixture
def configured_settings() -> Settings:
    return Settings(groq_api_key="test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(groq_api_key="")


@pytest.fixture
def login_result() -> dict[str, Any]:
    return json.loads(json.dumps(LOGIN_FLOW_RESULT))
