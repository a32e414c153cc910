"""Pydantic request models for FastAPI endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ParameterRequest(BaseModel):
    name: str
    value: str | int | float | bool | None = None
    type: str = "string"


class InvocationRequest(BaseModel):
    """Same shape as the event a Bedrock agent sends to the Lambda function."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    function: str = ""
    action_group: str = Field("", alias="actionGroup")
    parameters: list[ParameterRequest] = Field(default_factory=list)
    session_id: str | None = Field(None, alias="sessionId")
    message_version: str | None = Field(None, alias="messageVersion")

    def to_event(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
