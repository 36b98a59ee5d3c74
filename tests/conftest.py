import os

# antes de importar internify: sem migrações no startup, banco padrão em memória
os.environ["RUN_MIGRATIONS"] = "0"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from internify.core.tokens import create_access_token
from internify.db.base import Base
from internify.db.session import get_db, make_engine
from internify.store.memory import InMemoryRecordStore
from internify.store.sql import SqlRecordStore

LOGO = "data:image/png;base64,iVBORw0KGgo="

SETTINGS_PAYLOAD = {
    "companyName": "Acme Labs",
    "companyLogo": LOGO,
    "supervisorName": "Grace Hopper",
    "supervisorSignature": "https://cdn.example.com/sig/grace.png",
    "ceoName": "Ada Lovelace",
    "ceoSignature": LOGO,
    "selectedTemplate": "classic",
}

def _intern_payload(**overrides):
    data = {
        "fullName": "John Doe",
        "email": "john.doe@example.com",
        "domain": "Web Development",
        "startDate": "2024-01-15",
        "endDate": "2024-04-15",
        "status": "completed",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture()
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def sql_store(session_factory):
    with session_factory() as db:
        yield SqlRecordStore(db)


@pytest.fixture()
def client(session_factory):
    from internify.main import api

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    api.dependency_overrides[get_db] = _get_db
    yield TestClient(api)
    api.dependency_overrides.clear()


@pytest.fixture()
def auth():
    def _headers(account_id: str = "acct-1"):
        return {"Authorization": f"Bearer {create_access_token(sub=account_id)}"}
    return _headers


@pytest.fixture()
def settings_payload():
    return dict(SETTINGS_PAYLOAD)


@pytest.fixture()
def intern_payload():
    return _intern_payload


@pytest.fixture()
def seeded_owner(memory_store, settings_payload):
    """Conta 'acct-1' com configuração completa no store em memória."""
    from internify.schemas.settings import UserSettingsUpdate
    from internify.services.settings import save_user_settings

    save_user_settings(memory_store, "acct-1", UserSettingsUpdate.model_validate(settings_payload))
    return "acct-1"
