from typing import Optional

from fastapi import APIRouter, Depends

from app.models import SearchResponse
from app.core.config import MPA_PATH
from app.services.filters import build_filter_url, parse_filter_input
from app.services.store import InMemoryProductStore, get_store

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.get("", response_model=SearchResponse)
async def search(
    size: Optional[str] = None,
    query: Optional[str] = None,
    store: InMemoryProductStore = Depends(get_store),
):
    search_filter = parse_filter_input(size=size, query=query)
    items = store.all_filtered(search_filter)
    return SearchResponse(
        count=len(items),
        filter_url=build_filter_url(MPA_PATH, search_filter),
        items=items,
    )
