"""CLI demo - send one prompt to an Amazon Nova model on Bedrock.

Usage::

    python -m scripts.invoke_model "Describe the purpose of a 'hello world' program in one line."
"""

from __future__ import annotations

import json

import click
from pydantic import ValidationError

from textchunker.config.generation.models import ConversationMessage, InferenceConfig
from textchunker.config.logging import configure_logging
from textchunker.config.settings import get_settings
from textchunker.services.generation.bedrock import BedrockConverseClient, GenerationError

DEFAULT_PROMPT = "Describe the purpose of a 'hello world' program in one line."


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("prompt", default=DEFAULT_PROMPT)
@click.option("--model-id", default=None, help="Bedrock model id (default from settings).")
@click.option("--max-tokens", type=int, default=None, help="Maximum response length.")
@click.option("--temperature", type=float, default=None, help="Sampling temperature (0-1).")
@click.option("--top-p", type=float, default=None, help="Nucleus sampling; use instead of --temperature.")
def main(
    prompt: str,
    model_id: str | None,
    max_tokens: int | None,
    temperature: float | None,
    top_p: float | None,
    client: BedrockConverseClient | None = None,
) -> None:
    """Invoke the model with PROMPT and print the reply, metrics and usage."""
    configure_logging()
    settings = get_settings()
    if temperature is None and top_p is None:
        temperature = settings.bedrock_temperature
    try:
        inference = InferenceConfig(
            max_tokens=max_tokens or settings.bedrock_max_tokens,
            temperature=temperature,
            top_p=top_p,
        )
    except ValidationError as e:
        raise click.BadParameter("; ".join(err["msg"] for err in e.errors())) from e
    model_id = model_id or settings.bedrock_model_id
    client = client or BedrockConverseClient()
    try:
        result = client.generate([ConversationMessage(text=prompt)], model_id=model_id, inference=inference)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result.text)
    click.echo(json.dumps(result.metrics))
    click.echo(json.dumps(result.usage))


if __name__ == "__main__":  # pragma: no cover
    main()
