"""
Canonical document model shared by both parsing pipelines.

Schema Design:
- Same shape whether the RFC came from HTML or plain text
- Immutable (frozen models, tuple collections) so a parsed Document can be
  cached and handed to many consumers
- Optional fields degrade to empty strings/lists, never to errors
- Subsections are one level deep and only produced by the HTML pipeline
"""

from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator


def placeholder_title(number: str) -> str:
    """
    Title used when the source does not yield one.

    Example:
        >>> placeholder_title('2616')
        'RFC 2616'
    """
    return f"RFC {number}"


class DocumentMetadata(BaseModel):
    """
    RFC-level metadata.

    Attributes:
        number: RFC number as requested (e.g., '2616')
        title: Document title, or 'RFC {number}' when unresolvable
        authors: Author names in document order (may be empty)
        date: Free-form publication date (may be empty)
        status: Publication status / category (may be empty)
        abstract: Abstract as a single line (may be empty)
        url: URL of the variant the document was parsed from
    """

    number: str = Field(
        ...,
        pattern=r'^[1-9]\d*$',
        description="RFC number without prefix",
        examples=["2616"]
    )

    title: str = Field(
        ...,
        min_length=1,
        description="Document title",
        examples=["Hypertext Transfer Protocol -- HTTP/1.1"]
    )

    authors: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Author names in document order"
    )

    date: str = Field(
        default="",
        description="Publication date as written in the source",
        examples=["June 1999"]
    )

    status: str = Field(
        default="",
        description="Publication status or category",
        examples=["Standards Track"]
    )

    abstract: str = Field(
        default="",
        description="Abstract collapsed to a single line"
    )

    url: str = Field(
        ...,
        description="Source URL of the parsed variant",
        examples=["https://www.ietf.org/rfc/rfc2616.txt"]
    )

    model_config = {"frozen": True}


class Subsection(BaseModel):
    """Titled block nested one level below a Section."""

    title: str = Field(..., description="Subsection heading text")
    content: str = Field(default="", description="Serialized inner markup")

    model_config = {"frozen": True}

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("subsection title must not be empty")
        return v


class Section(BaseModel):
    """
    Titled section of an RFC.

    Content is serialized inner markup for HTML sources and the raw
    line-joined body for text sources. `subsections` is None when no titled
    subsection was found; an empty list is normalized to None.
    """

    title: str = Field(..., description="Section heading text")
    content: str = Field(default="", description="Section body")
    subsections: Optional[Tuple[Subsection, ...]] = Field(
        default=None,
        description="Titled subsections (None when there are none)"
    )

    model_config = {"frozen": True}

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("section title must not be empty")
        return v

    @field_validator('subsections')
    @classmethod
    def empty_subsections_to_none(
        cls, v: Optional[Tuple[Subsection, ...]]
    ) -> Optional[Tuple[Subsection, ...]]:
        if not v:
            return None
        return v


class Document(BaseModel):
    """
    Parsed RFC: metadata, section tree and full-text fallback.

    Example:
        >>> doc = Document(
        ...     metadata=DocumentMetadata(
        ...         number="2616",
        ...         title="Hypertext Transfer Protocol -- HTTP/1.1",
        ...         url="https://www.ietf.org/rfc/rfc2616.txt"
        ...     ),
        ...     sections=[Section(title="Introduction", content="...")],
        ...     full_text="..."
        ... )
        >>> doc.metadata.number
        '2616'
    """

    metadata: DocumentMetadata
    sections: Tuple[Section, ...] = Field(
        default_factory=tuple,
        description="Sections in document order"
    )
    full_text: str = Field(
        default="",
        description="Entire extracted text, independent of sections"
    )

    model_config = {"frozen": True}

    def to_dict(self) -> dict:
        """
        Convert to the wire/storage shape.

        Subsections that were not found are omitted rather than stored as
        null or an empty list. Tuples come out as lists.
        """
        return self.model_dump(mode='json', exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> 'Document':
        """Rebuild a Document from to_dict() output; unknown keys are ignored."""
        return cls.model_validate(data)

    def __repr__(self) -> str:
        """Truncate full_text so a repr doesn't flood the terminal."""
        text_preview = self.full_text[:200] + "..." if len(self.full_text) > 200 else self.full_text
        return (
            f"Document("
            f"number='{self.metadata.number}', "
            f"title='{self.metadata.title}', "
            f"sections={len(self.sections)}, "
            f"url='{self.metadata.url}', "
            f"full_text='{text_preview}')"
        )
