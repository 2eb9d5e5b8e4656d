"""Model source providers.

Exports:
    - ModelSourceProvider: Capability contract used by the reconciler
    - URIProvider: Provider for host, object store and Ollama sources
    - new_model_source_provider: Build a provider from a source URI
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from model_source.providers.base import ModelSourceProvider
from model_source.providers.uri import URIProvider
from model_source.uri import model_source_from_uri

if TYPE_CHECKING:
    from model_source.config import ModelSourceConfig


def new_model_source_provider(
    model_name: str, uri: str, config: ModelSourceConfig | None = None
) -> ModelSourceProvider:
    """Create the provider for a model stored at ``uri``.

    Args:
        model_name: Name of the model resource.
        uri: Source URI, e.g. ``s3://bucket/models/opt-125m``.
        config: Provider configuration, defaults to the process-wide one.

    Returns:
        A provider ready to mutate pod templates.

    Raises:
        InvalidURIError: If the URI is malformed.
        UnsupportedProtocolError: If the URI uses an unknown protocol.
    """
    return URIProvider(model_source_from_uri(model_name, uri), config=config)


__all__ = [
    "ModelSourceProvider",
    "URIProvider",
    "new_model_source_provider",
]
