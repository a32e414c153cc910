from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Parameter:
    name: str
    value: str
    type: str = "string"


@dataclass(frozen=True)
class Invocation:
    """One function call from a Bedrock agent action group."""

    action_group: str
    function: str
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    # Only used for log correlation, never echoed back
    session_id: str | None = None
    message_version: str | None = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "Invocation":
        """
        Build an Invocation from the raw Lambda event.

        Missing keys become empty strings / an empty parameter list so that the
        router and handlers can answer with a structured failure instead of a
        KeyError.
        """
        parameters = []
        for raw in event.get("parameters") or []:
            if not isinstance(raw, Mapping):
                continue
            parameters.append(
                Parameter(
                    name=str(raw.get("name") or ""),
                    value=_coerce_value(raw.get("value")),
                    type=str(raw.get("type") or "string"),
                )
            )

        return cls(
            action_group=str(event.get("actionGroup") or ""),
            function=str(event.get("function") or ""),
            parameters=tuple(parameters),
            session_id=event.get("sessionId"),
            message_version=event.get("messageVersion"),
        )

    def get_parameter(self, name: str) -> str:
        """Value of the first parameter called `name`, or "" when absent."""
        for param in self.parameters:
            if param.name == name:
                return param.value
        return ""


def _coerce_value(value: Any) -> str:
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        return value
    return str(value)
