"""Model invocation request models. Read-only; no business logic."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class ConversationMessage(BaseModel):
    """One conversation turn sent to the model."""

    role: Literal["user", "assistant"] = Field(default="user")
    text: str = Field(..., min_length=1)

    def to_converse(self) -> dict[str, Any]:
        return {"role": self.role, "content": [{"text": self.text}]}


class InferenceConfig(BaseModel):
    """Inference parameters. Use either temperature or top_p, not both."""

    max_tokens: int = Field(default=500, ge=1, description="Maximum response length")
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_sampling(self):
        if self.temperature is not None and self.top_p is not None:
            raise ValueError("Set either temperature or top_p, not both")
        return self

    def to_converse(self) -> dict[str, Any]:
        body: dict[str, Any] = {"maxTokens": self.max_tokens}
        if self.temperature is not None:
            body["temperature"] = self.temperature
        if self.top_p is not None:
            body["topP"] = self.top_p
        return body
