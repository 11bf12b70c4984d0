"""
Endpoints managing user mapping tables.

- /corrections: post-translation corrections, persisted to disk. Handlers
  that write the file are plain functions and run in the threadpool.
- /mappings: custom mappings held in memory until restart
"""
from fastapi import APIRouter, Depends
import logging

from app.core.dependencies import get_converter
from app.core.exceptions import InvalidInputError
from app.models.api_models import CorrectionsResponse, MappingsRequest, MappingsResponse
from app.services.converter_service import NZSpellingConverter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["corrections"])


def _require_pairs(payload: MappingsRequest, field: str) -> dict:
    pairs = payload.pairs()
    if not pairs:
        raise InvalidInputError(f'"{field}" must be an object with from-to word pairs')
    return pairs


@router.get("/corrections", response_model=CorrectionsResponse)
async def get_corrections(converter: NZSpellingConverter = Depends(get_converter)):
    return CorrectionsResponse(corrections=converter.get_corrections())


@router.post("/corrections", response_model=CorrectionsResponse)
def add_corrections(
    payload: MappingsRequest,
    converter: NZSpellingConverter = Depends(get_converter),
):
    """Add or update corrections; they are written to disk and survive restarts."""
    pairs = _require_pairs(payload, "corrections")
    corrections = converter.add_corrections(pairs)
    logger.info(f"Added {len(pairs)} corrections", extra={"count": len(pairs)})
    return CorrectionsResponse(
        message="Corrections added successfully",
        corrections=corrections,
    )


@router.delete("/corrections/{word}", response_model=CorrectionsResponse)
def remove_correction(
    word: str,
    converter: NZSpellingConverter = Depends(get_converter),
):
    removed = converter.remove_correction(word)
    if removed:
        logger.info(f"Removed correction for {word!r}")
    return CorrectionsResponse(
        message=f'Correction for "{word}" removed successfully',
        corrections=converter.get_corrections(),
    )


@router.delete("/corrections", response_model=CorrectionsResponse)
def clear_corrections(converter: NZSpellingConverter = Depends(get_converter)):
    converter.clear_corrections()
    logger.info("Cleared all corrections")
    return CorrectionsResponse(
        message="All corrections cleared successfully",
        corrections={},
    )


@router.get("/mappings", response_model=MappingsResponse)
async def get_mappings(converter: NZSpellingConverter = Depends(get_converter)):
    return MappingsResponse(mappings=converter.get_custom_mappings())


@router.post("/mappings", response_model=MappingsResponse)
async def add_mappings(
    payload: MappingsRequest,
    converter: NZSpellingConverter = Depends(get_converter),
):
    """Add custom mappings for this process only."""
    pairs = _require_pairs(payload, "mappings")
    return MappingsResponse(
        message="Mappings added successfully",
        mappings=converter.add_custom_mappings(pairs),
    )


@router.delete("/mappings/{word}", response_model=MappingsResponse)
async def remove_mapping(
    word: str,
    converter: NZSpellingConverter = Depends(get_converter),
):
    converter.remove_custom_mapping(word)
    return MappingsResponse(
        message=f'Mapping for "{word}" removed successfully',
        mappings=converter.get_custom_mappings(),
    )


@router.delete("/mappings", response_model=MappingsResponse)
async def clear_mappings(converter: NZSpellingConverter = Depends(get_converter)):
    converter.clear_custom_mappings()
    return MappingsResponse(message="All mappings cleared successfully", mappings={})
