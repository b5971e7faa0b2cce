"""
Core modules for the cargo tools project.

This package contains the core business logic modules:
- strings: String utilities
- data: DataPoint and data utilities
- config: Config, ValidationError and validate_config
- service: CoreService
- parser: Cargo.toml and JSON decoding
- core: Async loading and processing functions shared by the front-ends
- logger: Logging infrastructure
- settings: Environment-driven settings
- cli: Command-line front-ends
"""

from .config import Config, ValidationError, create_default_config, validate_config
from .data import DataPoint, filter_by_threshold, process_data_points
from .service import CoreService

__all__ = [
    "Config",
    "CoreService",
    "DataPoint",
    "ValidationError",
    "create_default_config",
    "filter_by_threshold",
    "process_data_points",
    "validate_config",
]
