"""Dependency injection container for InvoNest.

Provides lazily built, settings-driven collaborators so that the HTTP layer
and the CLI share one wiring and tests can swap in their own settings.

Usage:
    from invonest.container import Container, get_container

    container = get_container()
    result = container.calculator.calculate("Maharashtra", "Karnataka", items)
"""

from functools import cached_property, lru_cache
from typing import TYPE_CHECKING

from invonest.config import Settings, get_settings
from invonest.logging_config import get_logger

if TYPE_CHECKING:
    from invonest.domain.hsn import HSNRateTable
    from invonest.services.gst_calculator import GSTCalculator

logger = get_logger(__name__)


class Container:
    """Dependency injection container.

    The container can be configured with custom settings for testing:

        test_settings = Settings(rounding_strategy=RoundingStrategy.PER_ITEM)
        container = Container(settings=test_settings)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        logger.debug(
            "container_created",
            environment=self._settings.environment.value,
            rounding_strategy=self._settings.rounding_strategy.value,
        )

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @cached_property
    def hsn_table(self) -> "HSNRateTable":
        """Get the HSN/SAC rate table with the configured default rate."""
        from invonest.domain.hsn import HSNRateTable

        return HSNRateTable(default_rate=self._settings.default_tax_rate)

    @cached_property
    def calculator(self) -> "GSTCalculator":
        """Get the GST calculator wired to the rate table."""
        from invonest.services.gst_calculator import GSTCalculator

        return GSTCalculator(
            rate_lookup=self.hsn_table,
            rounding=self._settings.rounding_strategy,
        )


_container: Container | None = None


@lru_cache
def get_container() -> Container:
    """Get the global container singleton.

    For testing, create a Container directly with custom settings instead
    of using this function.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container so the next access rebuilds it."""
    global _container
    _container = None
    get_container.cache_clear()


# FastAPI dependency functions
def get_calculator() -> "GSTCalculator":
    """FastAPI dependency for the GST calculator."""
    return get_container().calculator


def get_hsn_table() -> "HSNRateTable":
    """FastAPI dependency for the HSN rate table."""
    return get_container().hsn_table
