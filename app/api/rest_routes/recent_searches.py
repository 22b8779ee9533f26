from typing import List

from fastapi import APIRouter, HTTPException, status

from app.collections.recent_searches import (
    clear_recent_searches,
    read_recent_searches,
    save_recent_search,
)
from app.models.recent_search import RecentSearch, RecentSearchCreate

router = APIRouter(prefix="/recent-searches", tags=["Recent Searches"])


@router.get("", response_model=List[RecentSearch])
async def list_recent_searches():
    """Recent searches, newest first."""
    return await read_recent_searches()


@router.post("", response_model=RecentSearch, status_code=status.HTTP_201_CREATED)
async def create_recent_search(item: RecentSearchCreate):
    entry = await save_recent_search(item)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save recent search",
        )
    return entry


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recent_searches():
    success = await clear_recent_searches()
    if not success:
        raise HTTPException(
            status_code=500, detail="Failed to clear recent searches"
        )
    return
