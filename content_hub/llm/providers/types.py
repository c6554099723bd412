"""Type definitions for LLM providers."""

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

LLMInput = Union[str, list[dict[str, Any]]]  # Text or chat messages


class LLMResponse(BaseModel):
    """Standard response format for LLM generations."""

    text: str = Field(description="Generated text content")
    model: str = Field(description="Name of the model used")
    usage: dict[str, int] = Field(
        default_factory=dict, description="Token usage statistics"
    )

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate model field."""
        if not v or v.isspace():
            raise ValueError("Model name cannot be empty")
        return v

    @field_validator("usage", mode="before")
    @classmethod
    def validate_usage(cls, v: dict[str, Any] | None) -> dict[str, int]:
        """Coerce usage statistics to non-negative integers."""
        result: dict[str, int] = {}
        for key, value in (v or {}).items():
            if value is None:
                continue
            if not isinstance(value, int | float) or float(value) != int(value):
                raise ValueError("Usage values must be integers")
            if value < 0:
                raise ValueError("Usage values must be non-negative")
            result[key] = int(value)
        return result

    @property
    def content(self) -> str:
        """Get the generated text content."""
        return self.text

    def __str__(self) -> str:
        return self.text
