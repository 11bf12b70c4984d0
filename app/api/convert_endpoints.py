"""Conversion endpoint for text and JSON payloads."""
from fastapi import APIRouter, Depends
import logging
import time

from app.config.settings import get_settings
from app.core.dependencies import get_converter
from app.core.exceptions import InvalidInputError
from app.models.api_models import ConvertRequest, ConvertResponse
from app.services.converter_service import NZSpellingConverter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


def _has_text(request: ConvertRequest) -> bool:
    # any explicit value counts, even null or a number; only "" is blank
    return "text" in request.model_fields_set and request.text != ""


def _has_data(request: ConvertRequest) -> bool:
    data = request.data
    return not (data is None or (isinstance(data, (str, int, float)) and not data))


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    request: ConvertRequest,
    converter: NZSpellingConverter = Depends(get_converter),
):
    """
    Convert text or any JSON value to NZ spelling.

    ``text`` must be a string; ``data`` may be an object, array or scalar and
    has every string leaf converted. A non-empty ``text`` wins over ``data``;
    any non-string ``text`` is rejected even when ``data`` is present.
    """
    has_text = _has_text(request)
    if not has_text and not _has_data(request):
        raise InvalidInputError('Either "text" (string) or "data" (object/array) is required')

    start = time.perf_counter()

    if has_text:
        if not isinstance(request.text, str):
            raise InvalidInputError(
                '"text" must be a string',
                details={"type": type(request.text).__name__},
            )
        max_length = get_settings().converter.max_text_length
        if len(request.text) > max_length:
            raise InvalidInputError(
                f'"text" exceeds the maximum length of {max_length} characters',
                details={"length": len(request.text), "max_length": max_length},
            )
        converted = await converter.convert(request.text)
        kind = "text"
    else:
        converted = await converter.convert_object(request.data)
        kind = "data"

    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        f"Converted {kind} in {latency_ms:.2f}ms",
        extra={"kind": kind, "latency_ms": latency_ms},
    )
    return ConvertResponse(converted=converted)
