"""CLI demo - run every chunking strategy over a sample document.

Usage::

    python -m scripts.chunking_demo
    python -m scripts.chunking_demo notes.txt --chunk-size 300
"""

from __future__ import annotations

import json
import pathlib

import click

from textchunker.services.chunking.chunker import Chunker, default_chunker
from textchunker.services.chunking.exceptions import InvalidConfigError

SAMPLE_TEXT = """This is a sample text document that we will use to demonstrate various chunking strategies.

It contains multiple paragraphs with different types of content. Some paragraphs are longer than others,
which will help show how different chunking methods handle varying content lengths.

We can also include some technical content like code snippets or structured data. The chunking algorithms
should preserve the semantic meaning while breaking the text into manageable pieces.

This is particularly useful for processing large documents with AI models, where we need to stay within
token limits while maintaining context and readability."""

SAMPLE_MARKDOWN = (
    "# Title\n\n## Subtitle\n\nThis is **bold** text.\n\n- List item 1\n- List item 2\n\n"
    '```python\nprint("Hello World")\n```'
)


def _report(label: str, chunks: list[str]) -> None:
    click.echo(label)
    click.echo(f"   Created {len(chunks)} chunks")
    if chunks:
        click.echo(f"   First chunk: {chunks[0][:100]}...\n")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("source", required=False, type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path))
@click.option("--chunk-size", type=int, default=150, show_default=True)
@click.option("--chunk-overlap", type=int, default=50, show_default=True)
@click.option("--skip-tokens", is_flag=True, help="Skip token chunking (needs the tiktoken encoding).")
def main(
    source: pathlib.Path | None,
    chunk_size: int,
    chunk_overlap: int,
    skip_tokens: bool,
    chunker: Chunker | None = None,
) -> None:
    """Chunk SOURCE (or a built-in sample) with each strategy and print statistics."""
    text = source.read_text(encoding="utf-8") if source else SAMPLE_TEXT
    try:
        chunker = chunker or Chunker(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    except InvalidConfigError as e:
        raise click.BadParameter(str(e)) from e

    click.echo("=== Chunker Demonstration ===\n")
    recursive = chunker.split_recursive(text)
    _report("1. Recursive character chunking:", recursive)
    if not skip_tokens:
        _report("2. Token chunking:", chunker.split_token(text, {"chunk_size": 50, "chunk_overlap": 10}))
    _report("3. Sentence chunking:", chunker.split_by_sentence(text, {"chunk_size": 200}))
    _report("4. Equal-size chunking:", chunker.split_equal_size(text, 100, 20))
    _report("5. Markdown chunking:", chunker.split_markdown(SAMPLE_MARKDOWN, {"chunk_size": 100, "chunk_overlap": 0}))

    click.echo("6. Chunk statistics:")
    if recursive:
        click.echo(json.dumps(chunker.compute_statistics(recursive).model_dump(by_alias=True), indent=2))
    click.echo("\n7. Chunk validation:")
    click.echo(json.dumps(chunker.validate(recursive, 200).model_dump(by_alias=True), indent=2))

    click.echo("\n8. Default chunker:")
    defaults = default_chunker.split_recursive(text)
    click.echo(f"   Created {len(defaults)} chunks with default settings")


if __name__ == "__main__":  # pragma: no cover
    main()
