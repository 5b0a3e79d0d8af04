"""Sent-email history endpoints."""

import logfire
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_history_store
from schemas.history import ClearHistoryResponse, HistoryResponse
from services.history_store import HistoryStore


router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=HistoryResponse)
async def get_history(history: HistoryStore = Depends(get_history_store)):
    """All emails handed to the mail client, most recent batch first."""
    records = history.records
    return HistoryResponse(records=records, count=len(records))


@router.delete("", response_model=ClearHistoryResponse)
async def clear_history(
    confirm: bool = Query(False, description="Must be true to actually clear history"),
    history: HistoryStore = Depends(get_history_store),
):
    """
    Delete all history.

    Without confirm=true nothing is deleted and cleared is False.
    """
    cleared = history.clear(confirmed=confirm)
    logfire.info("History clear requested", confirmed=confirm, cleared=cleared)
    return ClearHistoryResponse(cleared=cleared, count=len(history))
