"""Core types: results, exit codes, registry configuration."""

from .config import RegistryConfig, resolve_registry_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "RegistryConfig",
    "resolve_registry_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
