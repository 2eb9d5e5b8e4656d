"""Parsing of model source URIs.

Supported forms:

    oss://<bucket>.<endpoint>/<path>
    s3://<bucket>/<path>
    gcs://<bucket>/<path>
    host:///<absolute path>
    ollama://<model tag>
"""

from __future__ import annotations

import logging

from model_source.models import ModelSource, SourceProtocol
from model_source.utils.errors import InvalidURIError

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = "://"


def parse_uri(uri: str) -> tuple[SourceProtocol, str]:
    """Split a URI into its protocol and the address after the scheme.

    Raises:
        InvalidURIError: If the URI has no scheme.
        UnsupportedProtocolError: If the scheme is not a supported protocol.
    """
    scheme, sep, address = uri.partition(SCHEME_SEPARATOR)
    if not sep or not scheme:
        raise InvalidURIError(f"Model source URI has no scheme: {uri!r}", details={"uri": uri})
    return SourceProtocol.parse(scheme), address


def parse_oss(address: str) -> tuple[str, str, str]:
    """Parse ``<bucket>.<endpoint>/<path>`` into (endpoint, bucket, path)."""
    host, sep, model_path = address.partition("/")
    bucket, dot, endpoint = host.partition(".")
    if not sep or not dot or not bucket or not endpoint:
        raise InvalidURIError(
            f"OSS address must look like <bucket>.<endpoint>/<path>: {address!r}",
            details={"address": address},
        )
    return endpoint, bucket, model_path


def parse_bucket_path(address: str) -> tuple[str, str]:
    """Parse ``<bucket>/<path>`` into (bucket, path)."""
    bucket, sep, model_path = address.partition("/")
    if not sep or not bucket:
        raise InvalidURIError(
            f"Object store address must look like <bucket>/<path>: {address!r}",
            details={"address": address},
        )
    return bucket, model_path


def model_source_from_uri(model_name: str, uri: str) -> ModelSource:
    """Build a source descriptor from a model name and its source URI."""
    protocol, address = parse_uri(uri)

    bucket = ""
    endpoint = ""
    if protocol == SourceProtocol.OSS:
        endpoint, bucket, model_path = parse_oss(address)
    elif protocol in (SourceProtocol.S3, SourceProtocol.GCS):
        bucket, model_path = parse_bucket_path(address)
    else:
        # HOST keeps the absolute path, OLLAMA the model tag.
        model_path = address

    logger.debug(f"Parsed {uri}: protocol={protocol.value} bucket={bucket!r} path={model_path!r}")
    return ModelSource(
        model_name=model_name,
        protocol=protocol,
        bucket=bucket,
        endpoint=endpoint,
        model_path=model_path,
        uri=uri,
    )
