from pydantic import BaseModel, Field, field_validator


class SummaryRequest(BaseModel):
    """Request payload for the summary endpoint.

    Attributes:
        url: Location of the PDF document to summarize.
        custom_instructions: Optional instructions appended to the prompt.
    """

    url: str = Field(..., min_length=1)
    custom_instructions: str | None = None

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: str) -> str:
        """Strip whitespace from URL before validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("url")
    @classmethod
    def require_http_url(cls, v: str) -> str:
        """Accept only http(s) URLs."""
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v


class SummaryResponse(BaseModel):
    """Summary of a fetched document.

    Attributes:
        url: The summarized document's URL.
        chunk_count: Number of text chunks summarized.
        summaries: One summary per chunk, in document order.
        summary: All chunk summaries joined into one document.
    """

    url: str
    chunk_count: int = Field(ge=1)
    summaries: list[str]
    summary: str


class ErrorResponse(BaseModel):
    """Error body returned by the API.

    Attributes:
        detail: Human-readable error message.
    """

    detail: str
