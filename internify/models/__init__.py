# internify/models/__init__.py
# Carrega internify.db.base primeiro: ele registra todas as tabelas no metadata.
from internify.db.base import Base  # noqa: F401

__all__: list[str] = []
