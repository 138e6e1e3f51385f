"""SQLAlchemy engine factory bound to the configured database URL."""

from typing import Any, Optional

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from sql_metamodel.config import get_settings
from sql_metamodel.utils.logging import get_logger

logger = get_logger(__name__)


def create_engine(url: Optional[str] = None, **kwargs: Any) -> Engine:
    """Create an engine for ``url``, defaulting to the DATABASE_URL setting."""
    database_url = url or get_settings().DATABASE_URL
    engine = sa.create_engine(database_url, **kwargs)
    logger.info("engine.created", dialect=engine.dialect.name, DATABASE_URL=database_url)
    return engine
