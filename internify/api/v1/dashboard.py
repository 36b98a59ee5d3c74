from fastapi import APIRouter, Depends

from internify.api.deps import get_store, get_current_account
from internify.schemas.dashboard import DashboardStats
from internify.services.dashboard import dashboard_stats
from internify.store.base import RecordStore

router = APIRouter()

@router.get("/stats", response_model=DashboardStats)
def get_stats(
    store: RecordStore = Depends(get_store),
    account_id: str = Depends(get_current_account),
):
    return dashboard_stats(store, account_id)
