"""Polaczenie z baza danych - engine, sesje i tworzenie tabel."""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Engine dla podanego URL.

    PostgreSQL dostaje pule polaczen, SQLite w pamieci jedno wspoldzielone
    polaczenie (inaczej kazda sesja widzialaby pusta baze).
    """
    if database_url.startswith("postgresql"):
        return create_engine(
            database_url,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(database_url, connect_args={"check_same_thread": False})


engine = create_db_engine(get_settings().database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Bazowa klasa modeli (uzytkownicy, rezerwacje, kody promocyjne)."""


def get_db():
    """Dependency - sesja bazy na czas zadania.

    Niezatwierdzone zmiany sa wycofywane, gdy zadanie konczy sie bledem bazy.
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        logger.exception("Blad bazy danych - wycofuje transakcje")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None):
    """Utworz tabele wszystkich modeli."""
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.debug("Tabele gotowe: %s", ", ".join(sorted(Base.metadata.tables)))
