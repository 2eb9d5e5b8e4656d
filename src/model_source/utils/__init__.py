"""Utility functions and helpers for model source providers."""

from model_source.utils.env import (
    copy_env,
    ensure_env_vars,
    find_container,
    secret_env_var,
)
from model_source.utils.errors import (
    InvalidURIError,
    ModelSourceError,
    UnsupportedProtocolError,
)

__all__ = [
    # Errors
    "ModelSourceError",
    "InvalidURIError",
    "UnsupportedProtocolError",
    # Env vars
    "copy_env",
    "ensure_env_vars",
    "find_container",
    "secret_env_var",
]
