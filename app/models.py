from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


DEFAULT_SIZE = Size.SMALL


class Filter(BaseModel):
    """Validated search state shared by every strategy.

    ``size`` is always one of :class:`Size`; ``query`` is ``None`` when no
    text filter applies (never an empty string).
    """

    model_config = ConfigDict(frozen=True)

    size: Size = DEFAULT_SIZE
    query: Optional[str] = None


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    size: Size


class SearchResponse(BaseModel):
    count: int
    filter_url: str
    items: List[Product]
