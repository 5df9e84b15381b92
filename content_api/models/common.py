"""Common Pydantic models shared across routes."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class ArticleCard(BaseModel):
    id: Optional[Union[int, str]] = None
    slug: Optional[str] = None
    title: str
    excerpt: str = ""
    category_id: Optional[Union[int, str]] = None
    featured: bool = False
    featured_image: Optional[str] = None
    author_name: Optional[str] = None
    published_at: Optional[str] = None
    reading_time: Optional[int] = None
    score: float
    reasons: List[str] = []
    reason_labels: List[str] = []
    breakdown: Dict[str, float] = {}
    position: Optional[int] = None
