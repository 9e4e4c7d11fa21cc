"""
Apply and revert the schema migrations.

Wraps Alembic so services and deploy scripts can run the migrations without
an ``alembic`` invocation from the repository root::

    frameforge-migrate upgrade
    frameforge-migrate downgrade base
    frameforge-migrate sql downgrade

A failed step is fatal: it is logged, raised as ``MigrationError`` and the
CLI exits with status 1 so the calling deployment stops.
"""
import argparse
import io
import logging
import sys
from typing import List, Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import pool

from frameforge_contracts.core.config import configs
from frameforge_contracts.core.db import create_sync_engine, render_url, to_sync_url
from frameforge_contracts.errors import MigrationError

logger = logging.getLogger(__name__)


def alembic_config(url: Optional[str] = None, output_buffer=None) -> Config:
    cfg = Config(configs.ALEMBIC_INI_PATH, output_buffer=output_buffer)
    # Logging is configured by the caller, not by alembic.ini
    cfg.attributes["configure_logger"] = False
    if url:
        # ConfigParser interpolation: a literal % must be doubled
        cfg.set_main_option("sqlalchemy.url", to_sync_url(url).replace("%", "%%"))
    return cfg


def migration_chain() -> List[str]:
    """Revision ids in the order they are applied, oldest first."""
    script = ScriptDirectory.from_config(alembic_config())
    return [rev.revision for rev in reversed(list(script.walk_revisions("base", "heads")))]


def upgrade(url: Optional[str] = None, revision: str = "head") -> None:
    target = url or configs.DATABASE_URI
    logger.info(f"[migrate] upgrade -> {revision} url={render_url(to_sync_url(target))}")
    try:
        command.upgrade(alembic_config(target), revision)
    except Exception as exc:
        logger.exception(f"[migrate] upgrade -> {revision} failed")
        raise MigrationError(f"upgrade to {revision} failed: {exc}") from exc


def downgrade(url: Optional[str] = None, revision: str = "base") -> None:
    target = url or configs.DATABASE_URI
    logger.info(f"[migrate] downgrade -> {revision} url={render_url(to_sync_url(target))}")
    try:
        command.downgrade(alembic_config(target), revision)
    except Exception as exc:
        logger.exception(f"[migrate] downgrade -> {revision} failed")
        raise MigrationError(f"downgrade to {revision} failed: {exc}") from exc


def current(url: Optional[str] = None) -> Optional[str]:
    """Revision recorded in the database's alembic_version table, if any."""
    engine = create_sync_engine(url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()


def render_sql(direction: str = "upgrade", url: Optional[str] = None) -> str:
    """Offline DDL for the whole chain, without touching a database."""
    buf = io.StringIO()
    cfg = alembic_config(url, output_buffer=buf)
    if direction == "upgrade":
        command.upgrade(cfg, "head", sql=True)
    elif direction == "downgrade":
        command.downgrade(cfg, "head:base", sql=True)
    else:
        raise ValueError(f"unknown direction: {direction!r}")
    return buf.getvalue()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frameforge-migrate",
        description="Apply or revert the FrameForge schema migrations",
    )
    parser.add_argument("--url", default=None, help="database URL (default: DATABASE_URL / DB_* settings)")
    parser.add_argument("--log-level", default=configs.LOG_LEVEL)

    sub = parser.add_subparsers(dest="command", required=True)

    p_up = sub.add_parser("upgrade", help="apply migrations")
    p_up.add_argument("revision", nargs="?", default="head")

    p_down = sub.add_parser("downgrade", help="revert migrations")
    p_down.add_argument("revision", nargs="?", default="base")

    sub.add_parser("current", help="show the applied revision")
    sub.add_parser("history", help="list revisions in apply order")

    p_sql = sub.add_parser("sql", help="print DDL without connecting")
    p_sql.add_argument("direction", choices=["upgrade", "downgrade"])

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        if args.command == "upgrade":
            upgrade(args.url, args.revision)
        elif args.command == "downgrade":
            downgrade(args.url, args.revision)
        elif args.command == "current":
            print(current(args.url) or "base")
        elif args.command == "history":
            for revision in migration_chain():
                print(revision)
        elif args.command == "sql":
            sys.stdout.write(render_sql(args.direction, args.url))
    except MigrationError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
