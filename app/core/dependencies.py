"""
Dependency injection setup for FastAPI.
Provides the service container holding the converter and its mapping stores.
"""

from fastapi import Request
from typing import Optional
import logging
import asyncio

from app.config.settings import Settings, get_settings
from app.core.exceptions import InitializationError, NotInitializedError
from app.services.converter_service import NZSpellingConverter
from app.services.mapping_store import InMemoryMappingStore, JsonFileMappingStore


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container owning the converter for the lifetime of the application.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._converter: Optional[NZSpellingConverter] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def build_converter(self) -> NZSpellingConverter:
        config = self.settings.converter
        return NZSpellingConverter(
            config,
            corrections=JsonFileMappingStore(self.settings.get_corrections_path()),
            custom_mappings=InMemoryMappingStore(),
        )

    async def initialize_services(self) -> None:
        """
        Create and initialize the converter.

        A failed initialization is logged and leaves the container in the
        "not initialized" state; conversion endpoints answer 503 until a
        later call succeeds.
        """
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")

            try:
                if self._converter is None:
                    converter = self.build_converter()
                    converter.corrections.load()
                    self._converter = converter
                await self._converter.initialize()
            except InitializationError as e:
                logger.error(f"Service container initialization failed: {e.message}", exc_info=True)
                return

            self._initialized = True
            logger.info("Service container initialization completed")

    async def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")
        self._converter = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get_converter(self) -> NZSpellingConverter:
        """Get converter instance."""
        if self._converter is None:
            raise NotInitializedError()
        return self._converter

    def set_converter(self, converter: NZSpellingConverter) -> None:
        """Replace the converter (used by tests and alternate corpora)."""
        self._converter = converter
        self._initialized = converter.initialized


# Global service container instance
service_container = ServiceContainer()


def get_service_container(request: Request) -> ServiceContainer:
    return getattr(request.app.state, "service_container", service_container)


def get_converter(request: Request) -> NZSpellingConverter:
    """FastAPI dependency returning the application's converter."""
    return get_service_container(request).get_converter()
