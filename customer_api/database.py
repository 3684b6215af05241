# customer_api/database.py

import os
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from customer_api.models import Base


class Database:
    """
    Owns the engine (and therefore the connection pool) and the session factory.
    One instance is created per application.
    """

    def __init__(self, url: str):
        connect_args = {}
        url_info = make_url(url)
        if url_info.get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False
            if url_info.database and url_info.database != ":memory:":
                os.makedirs(os.path.dirname(os.path.abspath(url_info.database)), exist_ok=True)

        self.engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def init_db(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_db(request: Request):
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
