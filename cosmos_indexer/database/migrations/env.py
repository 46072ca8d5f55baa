"""Alembic environment for the cosmos indexer database

The database URL comes from COSMOS_INDEXER_DB_URL, then from the indexer
config file named by COSMOS_INDEXER_CONFIG, then from alembic.ini.
"""

import os
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool
from alembic import context

from cosmos_indexer.database.base import ModelBase
from cosmos_indexer.database.types import CosmosAddressType, TxHashType, DecimalString
from cosmos_indexer.database.tables import *  # noqa: F401,F403  registers every table

# this is the Alembic Config object
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = ModelBase.metadata


def render_item(type_, obj, autogen_context):
    """Custom rendering for our types to ensure proper imports in migration files"""
    if type_ == 'type':
        if isinstance(obj, CosmosAddressType):
            autogen_context.imports.add("from cosmos_indexer.database.types import CosmosAddressType")
            return "CosmosAddressType()"
        elif isinstance(obj, TxHashType):
            autogen_context.imports.add("from cosmos_indexer.database.types import TxHashType")
            return "TxHashType()"
        elif isinstance(obj, DecimalString):
            autogen_context.imports.add("from cosmos_indexer.database.types import DecimalString")
            return "DecimalString()"
    return False


def get_database_url():
    url = os.getenv("COSMOS_INDEXER_DB_URL")
    if url:
        return url

    config_file = os.getenv("COSMOS_INDEXER_CONFIG")
    if config_file:
        from cosmos_indexer.core.config import IndexerConfig
        return IndexerConfig.from_file(config_file).database.url

    url = config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("No database URL: set COSMOS_INDEXER_DB_URL or COSMOS_INDEXER_CONFIG")
    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_item=render_item,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    config_dict = config.get_section(config.config_ini_section) or {}
    config_dict['sqlalchemy.url'] = get_database_url()

    connectable = engine_from_config(
        config_dict,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_item=render_item,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
