"""Tests for model source URI parsing."""

import pytest

from model_source.models import SourceProtocol
from model_source.uri import (
    model_source_from_uri,
    parse_bucket_path,
    parse_oss,
    parse_uri,
)
from model_source.utils.errors import InvalidURIError, UnsupportedProtocolError


class TestParseURI:
    """Tests for parse_uri function."""

    def test_splits_scheme(self) -> None:
        """Test the scheme becomes the protocol."""
        assert parse_uri("s3://bucket/models/opt-125m") == (
            SourceProtocol.S3,
            "bucket/models/opt-125m",
        )

    def test_host_keeps_absolute_path(self) -> None:
        """Test host URIs keep their leading slash."""
        assert parse_uri("host:///workspace/models/model.gguf") == (
            SourceProtocol.HOST,
            "/workspace/models/model.gguf",
        )

    def test_missing_scheme(self) -> None:
        """Test URIs without a scheme are rejected."""
        with pytest.raises(InvalidURIError):
            parse_uri("/workspace/models")

    def test_unknown_scheme(self) -> None:
        """Test unsupported schemes are rejected."""
        with pytest.raises(UnsupportedProtocolError):
            parse_uri("https://huggingface.co/facebook/opt-125m")


class TestParseAddresses:
    """Tests for object store address parsing."""

    def test_parse_oss(self) -> None:
        """Test bucket and endpoint are split from the host."""
        endpoint, bucket, path = parse_oss("models.oss-cn-hangzhou.aliyuncs.com/qwen/Qwen2-0.5B")
        assert endpoint == "oss-cn-hangzhou.aliyuncs.com"
        assert bucket == "models"
        assert path == "qwen/Qwen2-0.5B"

    def test_parse_oss_without_endpoint(self) -> None:
        """Test an OSS address needs an endpoint."""
        with pytest.raises(InvalidURIError):
            parse_oss("models/qwen/Qwen2-0.5B")

    def test_parse_bucket_path(self) -> None:
        """Test bucket and key are split on the first slash."""
        assert parse_bucket_path("bucket/models/opt-125m") == ("bucket", "models/opt-125m")

    def test_parse_bucket_path_without_key(self) -> None:
        """Test an address without a key is rejected."""
        with pytest.raises(InvalidURIError):
            parse_bucket_path("bucket")


class TestModelSourceFromURI:
    """Tests for model_source_from_uri function."""

    def test_oss(self) -> None:
        """Test OSS URIs fill bucket, endpoint and path."""
        uri = "oss://models.oss-cn-hangzhou.aliyuncs.com/qwen/Qwen2-0.5B"
        source = model_source_from_uri("qwen2-0-5b", uri)
        assert source.protocol == SourceProtocol.OSS
        assert source.bucket == "models"
        assert source.endpoint == "oss-cn-hangzhou.aliyuncs.com"
        assert source.model_path == "qwen/Qwen2-0.5B"
        assert source.uri == uri

    @pytest.mark.parametrize(
        "scheme,protocol", [("s3", SourceProtocol.S3), ("gcs", SourceProtocol.GCS)]
    )
    def test_bucket_stores(self, scheme: str, protocol: SourceProtocol) -> None:
        """Test S3 and GCS URIs fill bucket and path."""
        source = model_source_from_uri("opt-125m", f"{scheme}://bucket/models/opt-125m")
        assert source.protocol == protocol
        assert source.bucket == "bucket"
        assert source.endpoint == ""
        assert source.model_path == "models/opt-125m"

    def test_ollama(self) -> None:
        """Test Ollama URIs carry the model tag as path."""
        source = model_source_from_uri("llama3", "ollama://llama3:8b")
        assert source.protocol == SourceProtocol.OLLAMA
        assert source.model_path == "llama3:8b"

    def test_host(self) -> None:
        """Test host URIs carry the host path."""
        source = model_source_from_uri("opt-125m", "host:///mnt/models/opt-125m")
        assert source.protocol == SourceProtocol.HOST
        assert source.model_path == "/mnt/models/opt-125m"
        assert source.bucket == ""
