"""Model source providers for model serving workloads.

Resolves where a model lives from its source URI and mutates a pod
template so the model is on disk, or reachable, before serving starts.
"""

from model_source.models import ModelSource, SourceProtocol
from model_source.providers import (
    ModelSourceProvider,
    URIProvider,
    new_model_source_provider,
)
from model_source.uri import model_source_from_uri, parse_uri
from model_source.utils.errors import (
    InvalidURIError,
    ModelSourceError,
    UnsupportedProtocolError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Models
    "ModelSource",
    "SourceProtocol",
    # Providers
    "ModelSourceProvider",
    "URIProvider",
    "new_model_source_provider",
    # Parsing
    "model_source_from_uri",
    "parse_uri",
    # Errors
    "ModelSourceError",
    "InvalidURIError",
    "UnsupportedProtocolError",
]
