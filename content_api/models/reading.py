"""Reading metrics request/response models."""

from pydantic import BaseModel


class EstimateRequest(BaseModel):
    content: str = ""
    language: str = "en"


class EstimateResponse(BaseModel):
    minutes: int
    words: int
    display_text: str
    short_text: str


class ProgressRequest(BaseModel):
    scrolled: float = 0
    total: float = 0
    total_minutes: int = 0


class ProgressResponse(BaseModel):
    progress_percent: int
    remaining_minutes: int


class ReadabilityRequest(BaseModel):
    content: str = ""
    language: str = "en"
