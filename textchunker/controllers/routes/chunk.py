"""POST /chunk: split inline text with a named strategy, plus statistics and validation endpoints."""

from fastapi import APIRouter, HTTPException

from textchunker.controllers.schema.chunk import (
    ChunkRequest,
    ChunkResponse,
    StatsRequest,
    ValidateRequest,
)
from textchunker.config.logging import get_logger
from textchunker.services.chunking.chunker import Chunker
from textchunker.services.chunking.exceptions import (
    EmptyInputError,
    ExternalSplitterError,
    InvalidConfigError,
)
from textchunker.services.chunking.statistics import ChunkStatistics, compute_statistics
from textchunker.services.chunking.validation import ValidationResult, validate_chunks

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])


@router.post("", response_model=ChunkResponse)
def chunk_text(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk the request text. Defaults come from the requested profile; request
    fields override them one by one. Library failures map to 502.
    """
    try:
        chunker = Chunker.from_profile(body.profile)
        if body.strategy == "delimiter":
            chunks = chunker.split_delimiter(body.text, body.delimiter, body.options())
        else:
            chunks = chunker.split(body.strategy, body.text, body.options())
        validation = validate_chunks(chunks, body.max_size) if body.max_size is not None else None
    except InvalidConfigError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ExternalSplitterError as e:
        logger.warning("Chunking dependency failed", extra={"strategy": body.strategy})
        raise HTTPException(status_code=502, detail="Text splitter failed") from e

    statistics = compute_statistics(chunks) if chunks else None
    return ChunkResponse(
        strategy=body.strategy,
        chunks=chunks,
        statistics=statistics,
        validation=validation,
    )


@router.post("/validate", response_model=ValidationResult)
def validate(body: ValidateRequest) -> ValidationResult:
    """Report which chunks exceed max_size."""
    return validate_chunks(body.chunks, body.max_size)


@router.post("/stats", response_model=ChunkStatistics)
def stats(body: StatsRequest) -> ChunkStatistics:
    """Character statistics for the given chunks. An empty list is rejected with 422."""
    try:
        return compute_statistics(body.chunks)
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
