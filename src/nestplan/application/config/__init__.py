"""Planning job schema, loading and validation.

Public API:
    - PlanningConfiguration: Root configuration model
    - PieceConfig, DimensionsConfig: Piece specification models
    - StockPlateConfig, OriginAreaConfig: Sheet and remnant models
    - PackingConfigSchema: Packing engine options
    - OutputConfig: Report output options
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult, ValidationError, ValidationWarning: Validation results
    - validate_config: Run the whole-job checks
    - config_to_*: Convert configuration to domain objects

Example:
    >>> from pathlib import Path
    >>> from nestplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.pieces)} pieces, {len(config.sheets)} sheets")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from nestplan.application.config.adapter import (
    config_to_packing_config,
    config_to_pieces,
    config_to_remnants,
    config_to_sheets,
    piece_config_to_domain,
)
from nestplan.application.config.loader import (
    ConfigError,
    format_json_path,
    load_config,
    load_config_from_dict,
)
from nestplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    DimensionsConfig,
    OriginAreaConfig,
    OutputConfig,
    PackingConfigSchema,
    PieceConfig,
    PlanningConfiguration,
    StockPlateConfig,
)
from nestplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_materials,
    check_piece_geometry,
    check_stock_filing,
    check_unique_ids,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DimensionsConfig",
    "OriginAreaConfig",
    "OutputConfig",
    "PackingConfigSchema",
    "PieceConfig",
    "PlanningConfiguration",
    "SUPPORTED_VERSIONS",
    "StockPlateConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_materials",
    "check_piece_geometry",
    "check_stock_filing",
    "check_unique_ids",
    "config_to_packing_config",
    "config_to_pieces",
    "config_to_remnants",
    "config_to_sheets",
    "format_json_path",
    "load_config",
    "load_config_from_dict",
    "piece_config_to_domain",
    "validate_config",
]
