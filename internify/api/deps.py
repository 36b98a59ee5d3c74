from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from internify.db.session import get_db
from internify.core.tokens import decode_access
from internify.store.base import RecordStore
from internify.store.sql import SqlRecordStore

# ----------------------------------------------------------------------
# Store por requisição (sessão SQLAlchemy injetada; testes podem trocar)
# ----------------------------------------------------------------------
def get_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db)

# ----------------------------------------------------------------------
# Lê o Bearer do header Authorization (sem usar OAuth2PasswordBearer)
# ----------------------------------------------------------------------
def get_bearer_token(authorization: str = Header(None, alias="Authorization")) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1]

# ----------------------------------------------------------------------
# Conta autenticada: o core só recebe o id (claim "sub")
# ----------------------------------------------------------------------
def get_current_account(token: str = Depends(get_bearer_token)) -> str:
    payload = decode_access(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid token")
    return str(payload["sub"])
