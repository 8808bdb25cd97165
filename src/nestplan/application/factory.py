"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestplan.application.commands import CreateCuttingPlanCommand
    from nestplan.infrastructure.bin_packing import PackingConfig, StockAllocationService
    from nestplan.infrastructure.formatters import JsonExporter, PlanReportFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    The allocation service for the default packing configuration is created
    once and reused. Any other configuration gets a fresh service per call.

    Example:
        ```python
        factory = get_factory()
        command = factory.create_plan_command(PackingConfig(strategy="best_short_side"))
        record = command.execute(pieces, remnants, sheets)
        print(factory.get_report_formatter().format(record))
        ```
    """

    _allocation_service: "StockAllocationService | None" = field(
        default=None, init=False, repr=False
    )
    _report_formatter: "PlanReportFormatter | None" = field(
        default=None, init=False, repr=False
    )
    _json_exporter: "JsonExporter | None" = field(default=None, init=False, repr=False)

    def get_allocation_service(
        self, config: "PackingConfig | None" = None
    ) -> "StockAllocationService":
        """Get the allocation service for a packing configuration."""
        from nestplan.infrastructure.bin_packing import PackingConfig, StockAllocationService

        if config is not None and config != PackingConfig():
            return StockAllocationService(config)
        if self._allocation_service is None:
            self._allocation_service = StockAllocationService(PackingConfig())
        return self._allocation_service

    def create_plan_command(
        self, config: "PackingConfig | None" = None
    ) -> "CreateCuttingPlanCommand":
        """Create a CreateCuttingPlanCommand wired to the allocation service."""
        from nestplan.application.commands import CreateCuttingPlanCommand

        return CreateCuttingPlanCommand(self.get_allocation_service(config))

    def get_report_formatter(self) -> "PlanReportFormatter":
        """Get or create the text report formatter."""
        if self._report_formatter is None:
            from nestplan.infrastructure.formatters import PlanReportFormatter

            self._report_formatter = PlanReportFormatter()
        return self._report_formatter

    def get_json_exporter(self) -> "JsonExporter":
        """Get or create the JSON exporter."""
        if self._json_exporter is None:
            from nestplan.infrastructure.formatters import JsonExporter

            self._json_exporter = JsonExporter()
        return self._json_exporter


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the process-wide default ServiceFactory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def reset_factory() -> None:
    """Drop the default factory (used by tests)."""
    global _default_factory
    _default_factory = None
