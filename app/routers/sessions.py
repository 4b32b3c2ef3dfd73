from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/search/sessions", tags=["sessions"])


# TODO: store filter state per session token and render the search from it.
@router.get("", response_class=PlainTextResponse)
async def list_sessions():
    return "Search sessions!"


@router.get("/{session_id}", response_class=PlainTextResponse)
async def session_detail(session_id: str):
    return "Search sessions detail"
