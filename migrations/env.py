# migrations/env.py
import os
from alembic import context
from sqlalchemy import engine_from_config, pool
from internify.db.base import Base
from internify.db.session import _normalize

# (1) carregar .env
from dotenv import load_dotenv
load_dotenv()

config = context.config

# (2) URL: env DATABASE_URL > alembic.ini > fallback sqlite
db_url = os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url")
if not db_url or db_url.strip() == "":
    db_url = "sqlite:///./data/internify.db"  # fallback
db_url = _normalize(db_url)

# (3) Alembic usará esta URL
config.set_main_option("sqlalchemy.url", db_url)

target_metadata = Base.metadata

def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = engine_from_config(config.get_section(config.config_ini_section), prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
