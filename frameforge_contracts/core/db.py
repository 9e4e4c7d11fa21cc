import logging
import ssl
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import Session, sessionmaker

from frameforge_contracts.core.config import configs

logger = logging.getLogger(__name__)


def to_sync_url(url: str) -> str:
    """Normalise a PostgreSQL URL onto the psycopg2 driver used by Alembic and tests."""
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql+psycopg2://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg2://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return url


def to_async_url(url: str) -> str:
    """Normalise a PostgreSQL URL onto the asyncpg driver."""
    for prefix in ("postgresql+psycopg2://", "postgresql://", "postgres://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    return url


def render_url(url: str) -> str:
    """Render a URL for log output with the password masked."""
    return make_url(url).render_as_string(hide_password=True)


def prepare_database_url(url: str) -> tuple[str, dict]:
    """
    Move libpq's ``sslmode`` off an asyncpg URL into ``connect_args["ssl"]``.

    asyncpg rejects ``sslmode`` as a query parameter, so the URL produced by
    ``to_async_url`` is cleaned here before the engine is built.
    """
    if not url:
        return url, {}

    parsed = make_url(url)
    sslmode = parsed.query.get("sslmode")
    if sslmode is None:
        return url, {}
    if isinstance(sslmode, tuple):
        sslmode = sslmode[-1]

    connect_args = {}
    if sslmode == "require":
        # Encrypt without verifying the server certificate
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ssl_context
    elif sslmode in ("verify-ca", "verify-full"):
        connect_args["ssl"] = ssl.create_default_context()
    elif sslmode == "disable":
        connect_args["ssl"] = False

    cleaned = parsed.difference_update_query(["sslmode"])
    return cleaned.render_as_string(hide_password=False), connect_args


def create_sync_engine(url: Optional[str] = None, **kwargs) -> Engine:
    url = to_sync_url(url or configs.DATABASE_URI)
    logger.info(f"[db] sync engine url={render_url(url)}")
    kwargs.setdefault("echo", configs.DB_ECHO)
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def create_async_db_engine(url: Optional[str] = None, **kwargs) -> AsyncEngine:
    cleaned_url, connect_args = prepare_database_url(to_async_url(url or configs.DATABASE_URI))
    logger.info(f"[db] async engine url={render_url(cleaned_url)}")
    kwargs.setdefault("echo", configs.DB_ECHO)
    kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(cleaned_url, connect_args=connect_args, **kwargs)


def get_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def transaction(session_factory: sessionmaker) -> Iterator[Session]:
    """Run a unit of work inside a single storage-engine transaction.

    Everything written through the yielded session is committed together when
    the block exits normally. Any exception rolls the whole transaction back
    and is re-raised unchanged, so a failure part way through leaves no rows
    behind.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


_async_session_factory: Optional[sessionmaker] = None


def _get_async_session_factory() -> sessionmaker:
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = sessionmaker(
            bind=create_async_db_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_factory


async def get_db():
    async with _get_async_session_factory()() as session:
        yield session
