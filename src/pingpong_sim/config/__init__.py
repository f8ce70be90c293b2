# src/pingpong_sim/config/__init__.py
from .run_config import RunConfig
from .parser import RunConfigParser
from .exceptions import ConfigParsingError, SchemaValidationError

__all__ = [
    "RunConfig",
    "RunConfigParser",
    "ConfigParsingError",
    "SchemaValidationError",
]
