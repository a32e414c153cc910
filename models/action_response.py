import json
from dataclasses import dataclass
from typing import Any

from .invocation import Invocation

MESSAGE_VERSION = "1.0"
RESPONSE_STATE_FAILURE = "FAILURE"
CONTENT_TYPE_TEXT = "TEXT"


def encode_body(payload: dict[str, Any]) -> str:
    """Compact JSON, non-ASCII kept verbatim so byte budgets match what is sent."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class ActionResponse:
    """
    Response envelope returned to a Bedrock agent.

    `response_state` is None on success; the key is then left out of the
    serialized envelope entirely.
    """

    action_group: str
    function: str
    payload: dict[str, Any]
    response_state: str | None = None

    @classmethod
    def success(cls, invocation: Invocation, payload: dict[str, Any]) -> "ActionResponse":
        return cls(
            action_group=invocation.action_group,
            function=invocation.function,
            payload=payload,
        )

    @classmethod
    def failure(cls, invocation: Invocation, error: str) -> "ActionResponse":
        return cls(
            action_group=invocation.action_group,
            function=invocation.function,
            payload={"error": error},
            response_state=RESPONSE_STATE_FAILURE,
        )

    @property
    def is_success(self) -> bool:
        return self.response_state is None

    @property
    def body(self) -> str:
        return encode_body(self.payload)

    def to_dict(self) -> dict[str, Any]:
        function_response: dict[str, Any] = {}
        if self.response_state is not None:
            function_response["responseState"] = self.response_state
        function_response["responseBody"] = {CONTENT_TYPE_TEXT: {"body": self.body}}

        return {
            "messageVersion": MESSAGE_VERSION,
            "response": {
                "actionGroup": self.action_group,
                "function": self.function,
                "functionResponse": function_response,
            },
        }
