from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    url: str = Field(description="The absolute URL of the result.")
    title: str | None = Field(default=None, description="The visible title of the result.")
    snippet: str | None = Field(default=None, description="The summary shown under the result, if any.")


class SearchResponse(BaseModel):
    results: list[SearchResult]


class SearchErrorResponse(BaseModel):
    error: str
