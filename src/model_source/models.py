"""Pydantic models for model source descriptors."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from model_source.utils.errors import UnsupportedProtocolError


class SourceProtocol(str, Enum):
    """Protocols a model source URI may use."""

    GCS = "GCS"
    OSS = "OSS"
    S3 = "S3"
    OLLAMA = "OLLAMA"
    HOST = "HOST"

    @classmethod
    def parse(cls, value: Any) -> "SourceProtocol":
        """Parse a protocol name case-insensitively.

        Raises:
            UnsupportedProtocolError: If the value names no known protocol.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnsupportedProtocolError(str(value)) from None

    @property
    def is_object_store(self) -> bool:
        """Whether models under this protocol are staged by the loader."""
        return self in (SourceProtocol.GCS, SourceProtocol.OSS, SourceProtocol.S3)


class ModelSource(BaseModel):
    """Where a model's files live and how to reach them.

    The meaning of ``model_path`` depends on the protocol: an absolute
    host path for HOST, the object key for object stores, and the
    runtime's own model tag for OLLAMA.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field("", description="Name of the model resource")
    protocol: SourceProtocol = Field(..., description="Source protocol")
    bucket: str = Field("", description="Object store bucket")
    endpoint: str = Field("", description="Object store endpoint (OSS only)")
    model_path: str = Field(..., description="Protocol-specific model location")
    uri: str = Field("", description="Original source URI")

    @field_validator("protocol", mode="before")
    @classmethod
    def _parse_protocol(cls, value: Any) -> SourceProtocol:
        return SourceProtocol.parse(value)

    @model_validator(mode="after")
    def _check_fields(self) -> "ModelSource":
        if not self.model_name and self.protocol != SourceProtocol.OLLAMA:
            raise ValueError(f"model_name is required for protocol {self.protocol.value}")
        if self.bucket and self.protocol in (SourceProtocol.HOST, SourceProtocol.OLLAMA):
            raise ValueError(f"bucket must be empty for protocol {self.protocol.value}")
        return self

    @property
    def is_object_store(self) -> bool:
        """Whether this source is fetched from an object store."""
        return self.protocol.is_object_store
