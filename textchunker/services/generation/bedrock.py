"""Amazon Bedrock text generation through the Converse API."""

from typing import Any

import boto3
import botocore

from textchunker.config.generation.models import ConversationMessage, InferenceConfig
from textchunker.config.logging import get_logger
from textchunker.config.settings import get_settings

logger = get_logger(__name__)


class GenerationError(Exception):
    """Raised when the model call fails or returns no text."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class GenerationResult:
    """Generated text with the usage and latency figures Bedrock reports."""

    def __init__(
        self,
        text: str,
        usage: dict[str, Any],
        metrics: dict[str, Any],
        stop_reason: str | None = None,
    ) -> None:
        self.text = text
        self.usage = usage
        self.metrics = metrics
        self.stop_reason = stop_reason

    def __repr__(self) -> str:
        return f"GenerationResult(stop_reason={self.stop_reason!r}, usage={self.usage!r})"


def _build_client(region: str | None = None):
    """bedrock-runtime client. Explicit settings credentials win over the default boto3 chain."""
    settings = get_settings()
    kwargs: dict[str, Any] = {"region_name": region or settings.aws_region}
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
        if settings.aws_session_token:
            kwargs["aws_session_token"] = settings.aws_session_token
    return boto3.client("bedrock-runtime", **kwargs)


class BedrockConverseClient:
    """
    Thin wrapper over bedrock-runtime `converse`. Model id defaults to
    settings.bedrock_model_id (an Amazon Nova model).
    """

    def __init__(self, client=None, region: str | None = None) -> None:
        self._client = client or _build_client(region)

    def generate(
        self,
        messages: list[ConversationMessage],
        model_id: str | None = None,
        inference: InferenceConfig | None = None,
    ) -> GenerationResult:
        settings = get_settings()
        model_id = model_id or settings.bedrock_model_id
        if inference is None:
            inference = InferenceConfig(
                max_tokens=settings.bedrock_max_tokens,
                temperature=settings.bedrock_temperature,
            )
        try:
            response = self._client.converse(
                modelId=model_id,
                messages=[m.to_converse() for m in messages],
                inferenceConfig=inference.to_converse(),
            )
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as e:
            logger.warning("Bedrock converse failed", extra={"model_id": model_id, "error_type": type(e).__name__})
            raise GenerationError(f"Can't invoke {model_id!r}. Reason: {e}", cause=e) from e
        content = ((response.get("output") or {}).get("message") or {}).get("content") or []
        texts = [part["text"] for part in content if "text" in part]
        if not texts:
            raise GenerationError(f"Bedrock response for {model_id!r} contained no text")
        return GenerationResult(
            text="".join(texts),
            usage=response.get("usage") or {},
            metrics=response.get("metrics") or {},
            stop_reason=response.get("stopReason"),
        )
