from fastapi import APIRouter, Depends

from app.services.store import InMemoryProductStore, get_store

router = APIRouter(prefix="/api/v1/health", tags=["health"])

@router.get("")
async def health(store: InMemoryProductStore = Depends(get_store)):
    return {"status": "ok", "products": len(store)}
