from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_engine(db_uri: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine.

    SQLite only enforces foreign keys (and so ON DELETE CASCADE / SET NULL)
    when the pragma is set on each connection.
    """
    engine = create_async_engine(db_uri, echo=echo, future=True)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine
