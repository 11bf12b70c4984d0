"""
Health and help endpoints.

- GET /health: liveness plus converter initialization state
- GET /help: endpoint documentation and pipeline description
"""

from fastapi import APIRouter, Depends
from typing import Dict, Any
import logging

from app.config.settings import get_settings
from app.core.dependencies import ServiceContainer, get_service_container
from app.core.error_handlers import error_handler
from app.core.exceptions import NotInitializedError
from app.models.api_models import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_service_container),
) -> HealthResponse:
    """Report whether the converter has finished loading its dictionaries."""
    details: Dict[str, Any] = {"errors": error_handler.get_error_statistics()}
    initialized = False
    try:
        converter = container.get_converter()
    except NotInitializedError as e:
        details["converter"] = {"initialized": False, "error": str(e)}
    else:
        details["converter"] = converter.get_status()
        initialized = converter.initialized

    return HealthResponse(
        status="ok" if initialized else "degraded",
        initialized=initialized,
        version=get_settings().app_version,
        details=details,
    )


@router.get("/help")
async def help_page() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Converts American/British English to New Zealand English spelling",
        "endpoints": {
            "GET /health": {"description": "Health check endpoint"},
            "GET /help": {"description": "This help documentation"},
            "POST /convert": {
                "description": "Convert text or JSON data to NZ spelling",
                "parameters": {
                    "text": "String to convert (optional)",
                    "data": "Object or array to convert (optional)",
                },
                "examples": {
                    "text": {"text": "The organization analyzed the color data."},
                    "data": {"data": {"title": "Color Report", "tags": ["organize", "analyze"]}},
                },
            },
            "GET /corrections": {"description": "View all active post-translation corrections"},
            "POST /corrections": {
                "description": "Add or update post-translation corrections (persisted to disk)",
                "example": {"corrections": {"cellphone": "mobile phone", "apartment": "flat"}},
            },
            "DELETE /corrections/{word}": {"description": "Remove a specific correction"},
            "DELETE /corrections": {"description": "Clear all corrections"},
            "GET /mappings": {"description": "View custom mappings (memory only)"},
            "POST /mappings": {
                "description": "Add custom mappings, reset on restart",
                "example": {"mappings": {"sidewalk": "footpath"}},
            },
            "DELETE /mappings/{word}": {"description": "Remove a specific custom mapping"},
            "DELETE /mappings": {"description": "Clear all custom mappings"},
        },
        "pipeline": [
            "1. Normalize special characters (em-dash, currency)",
            "2. Apply phrase map, exceptions and corrections",
            "3. Main translation (US -> UK English)",
            "4. Re-apply exceptions, corrections and phrase map",
            "5. Convert -ize to -ise where both dictionaries agree",
        ],
        "notes": [
            "Corrections are applied again AFTER main translation",
            "Use corrections to fix archaic forms (philtre -> filter, connexion -> connection)",
            "Use corrections for NZ-specific terms (sidewalk -> footpath, zip code -> postcode)",
            "Corrections are persisted and survive server restarts; custom mappings do not",
            "Longer phrases are replaced before shorter ones",
        ],
    }
