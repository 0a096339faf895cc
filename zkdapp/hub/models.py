"""
zkWasm hub response models.

Typed view over the JSON returned by the hub's image query endpoint.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImageRecord(BaseModel):
    """A single image registered on the zkWasm hub."""

    model_config = ConfigDict(extra="allow")

    md5: Optional[str] = Field(None, description="Uppercase MD5 of the WASM image")
    checksum: Optional[str] = Field(None, description="Image checksum assigned by the hub")
    name: Optional[str] = Field(None, description="Display name")
    description: Optional[str] = Field(None, description="Image description")
    circuit_size: Optional[int] = Field(None, description="Circuit size (k)")

    @field_validator("md5", "checksum", "name", "description", mode="before")
    @classmethod
    def coerce_text(cls, v):
        """The hub may send these as objects or numbers; keep a string form."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("circuit_size", mode="before")
    @classmethod
    def coerce_circuit_size(cls, v):
        """Display-only field: drop values that are not integral."""
        if isinstance(v, bool):
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None

    @property
    def has_checksum(self) -> bool:
        """Whether the hub assigned a checksum to this image."""
        return bool(self.checksum)


class ImageQueryResponse(BaseModel):
    """
    Envelope of the ``GET /image`` response.

    Records are kept raw; only the first one is parsed, via ``first``.
    """

    model_config = ConfigDict(extra="allow")

    result: List[Any] = Field(..., description="Matching image records")

    def first(self) -> Optional[ImageRecord]:
        """Parse and return the first record, or None when there is none."""
        if not self.result:
            return None
        return ImageRecord.model_validate(self.result[0])
