import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from moto_api.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Cria o engine a partir da string de conexão."""
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        # 'check_same_thread' é necessário apenas para SQLite
        kwargs["connect_args"] = {"check_same_thread": False}
        # Banco em memória: todas as sessões precisam da mesma conexão
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # O SQLite só respeita FOREIGN KEY / ON DELETE CASCADE com este PRAGMA
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# 1. Engine de Conexão
engine = build_engine(settings.database_url, echo=settings.sql_echo)

# 2. Fábrica de Sessões
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 3. Base Declarativa (os modelos de tabela herdam desta)
Base = declarative_base()


def init_db():
    """Cria as tabelas que ainda não existem."""
    # Importa os modelos para registrá-los no metadata
    from moto_api import database_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Banco de dados inicializado (%s)", engine.url.render_as_string(hide_password=True))


# --- Dependência do FastAPI: uma sessão por requisição ---
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
