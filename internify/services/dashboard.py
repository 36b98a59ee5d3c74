# internify/services/dashboard.py
from internify.models.intern import InternStatus
from internify.schemas.dashboard import DashboardStats
from internify.store.base import RecordStore

def dashboard_stats(store: RecordStore, owner_id: str) -> DashboardStats:
    # falha do storage sobe como StorageError; nada de "zerar" as estatísticas
    interns = store.list_interns(owner_id)
    counts = store.verification_counts(i.certificate_id for i in interns)
    return DashboardStats(
        total_interns=len(interns),
        generated_certs=sum(1 for i in interns if i.status == InternStatus.completed),
        verifications=sum(counts.values()),
        active_internships=sum(1 for i in interns if i.status == InternStatus.active),
    )
