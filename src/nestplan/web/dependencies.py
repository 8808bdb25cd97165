"""FastAPI dependency injection for planning services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from nestplan.application.factory import ServiceFactory, get_factory
from nestplan.infrastructure.formatters import JsonExporter


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_json_exporter(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> JsonExporter:
    """Dependency for the plan JSON exporter."""
    return factory.get_json_exporter()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
JsonExporterDep = Annotated[JsonExporter, Depends(get_json_exporter)]
