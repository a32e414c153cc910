"""Pydantic response models (DTOs) for FastAPI endpoints."""

from pydantic import BaseModel


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str
    functions: list[str]


class UnhandledErrorDTO(BaseModel):
    """Mirrors the payload the Lambda runtime returns for an uncaught exception."""

    errorType: str
    errorMessage: str
