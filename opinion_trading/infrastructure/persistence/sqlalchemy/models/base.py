"""Declarative base + shared column types."""

from sqlalchemy import BigInteger, Integer, MetaData
from sqlalchemy.orm import DeclarativeBase

# BIGINT на Postgres; INTEGER на SQLite (тільки INTEGER PRIMARY KEY autoincrement)
IdType = BigInteger().with_variant(Integer(), "sqlite")

# Стабільні імена constraints для Alembic autogenerate
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base для users / events / event_options / trades models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
