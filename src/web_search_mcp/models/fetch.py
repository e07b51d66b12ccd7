from typing import ClassVar

from pydantic import BaseModel, ConfigDict, PositiveInt

DEFAULT_TIMEOUT_MS = 15_000
DEFAULT_MAX_BYTES = 1_500_000


class FetchOptions(BaseModel):
    """Per-request limits for the bounded fetcher."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    timeout_ms: PositiveInt = DEFAULT_TIMEOUT_MS
    max_bytes: PositiveInt = DEFAULT_MAX_BYTES


class FetchOutcome(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    content: str
    title: str | None = None


class FetchPageResponse(BaseModel):
    url: str
    title: str | None = None
    content: str


class FetchPageErrorResponse(BaseModel):
    url: str
    error: str
