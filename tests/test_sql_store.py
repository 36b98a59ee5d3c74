from datetime import datetime, timedelta, timezone

import pytest

from internify.core.errors import RecordConflict, RecordNotFound
from internify.models.intern import InternStatus
from internify.schemas.intern import InternRecord
from internify.services.identity import generate_certificate_identity
from internify.store.sql import SqlRecordStore


def _record(owner="acct-1", name="John Doe", created_at=None, status=InternStatus.active):
    ident = generate_certificate_identity()
    return InternRecord(
        id=ident.internal_id,
        certificate_id=ident.certificate_id,
        full_name=name,
        email=None,
        domain="Web Development",
        start_date="2024-01-15",
        end_date="2024-04-15",
        created_by=owner,
        status=status,
        created_at=created_at or datetime.now(timezone.utc),
    )


def test_create_intern_creates_verification_pair(sql_store):
    rec = _record()
    ver = sql_store.create_intern(rec)

    assert ver.certificate_id == rec.certificate_id
    assert ver.intern_id == rec.id
    assert ver.verification_count == 0
    assert sql_store.get_intern(rec.id) == rec


def test_fresh_session_reads_equal_record(session_factory):
    rec = _record()
    with session_factory() as db:
        SqlRecordStore(db).create_intern(rec)
    with session_factory() as db:
        assert SqlRecordStore(db).get_intern(rec.id) == rec


def test_duplicate_certificate_id_is_a_conflict(sql_store):
    rec = _record()
    sql_store.create_intern(rec)
    clash = _record().model_copy(update={"certificate_id": rec.certificate_id})
    with pytest.raises(RecordConflict):
        sql_store.create_intern(clash)
    assert sql_store.get_intern(clash.id) is None


def test_increment_unknown_certificate(sql_store):
    with pytest.raises(RecordNotFound):
        sql_store.increment_verification("CERT-0-XXXXXXXXX", datetime.now(timezone.utc))
    assert sql_store.get_verification("CERT-0-XXXXXXXXX") is None


def test_increment_updates_count_and_timestamp(sql_store):
    rec = _record()
    sql_store.create_intern(rec)
    at = datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)

    sql_store.increment_verification(rec.certificate_id, at)
    ver = sql_store.increment_verification(rec.certificate_id, at)

    assert ver.verification_count == 2
    assert ver.last_verified == at
    assert sql_store.get_verification(rec.certificate_id).verification_count == 2


def test_list_interns_is_owner_scoped_and_newest_first(sql_store):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    older = _record(name="Older", created_at=base)
    newer = _record(name="Newer", created_at=base + timedelta(hours=1))
    other = _record(owner="acct-2", name="Other")
    for r in (older, newer, other):
        sql_store.create_intern(r)

    assert [i.full_name for i in sql_store.list_interns("acct-1")] == ["Newer", "Older"]
    assert [i.full_name for i in sql_store.list_interns("acct-2")] == ["Other"]


def test_verification_counts(sql_store):
    a, b = _record(), _record()
    sql_store.create_intern(a)
    sql_store.create_intern(b)
    sql_store.increment_verification(a.certificate_id, datetime.now(timezone.utc))

    counts = sql_store.verification_counts([a.certificate_id, b.certificate_id, "CERT-missing"])
    assert counts == {a.certificate_id: 1, b.certificate_id: 0}
    assert sql_store.verification_counts([]) == {}
