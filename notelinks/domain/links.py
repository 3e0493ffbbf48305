"""Link index domain models."""

from pydantic import BaseModel, Field, field_validator


class LinkRecord(BaseModel):
    """Outbound links reported for a single source document.

    Attributes:
        source_path: Full path of the source document
        outbound_links: Raw link tokens, resolved by the index on report
        source_id: Optional stable document ID, empty strings are treated as absent
    """

    source_path: str = Field(min_length=1)
    outbound_links: list[str] = []
    source_id: str | None = None

    @field_validator("source_id")
    @classmethod
    def empty_id_is_absent(cls, value: str | None) -> str | None:
        return value or None


class FileLinks(BaseModel):
    """Inbound and outbound links of a single file."""

    inbound: list[str] = []
    outbound: list[str] = []
