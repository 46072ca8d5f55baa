# cosmos_indexer/database/connection.py

from typing import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, Engine, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from ..core.logging import IndexerLogger, log_with_context, INFO, DEBUG, ERROR
from ..types import DatabaseConfig


class DatabaseManager:
    def __init__(self, config: DatabaseConfig):
        if not config:
            raise ValueError("DatabaseConfig is required")

        self.config = config
        self.logger = IndexerLogger.get_logger(f'database.{self.__class__.__name__.lower()}')
        self._engine = None
        self._session_factory = None
        self._repositories = {}  # Cache for repository instances

        log_with_context(self.logger, INFO, "DatabaseManager initialized",
                        db_url_host=self._extract_host_from_url(config.url))

    def _extract_host_from_url(self, url: str) -> str:
        if '@' in url and '/' in url:
            after_at = url.split('@')[1]
            return after_at.split('/')[0]
        return "local"

    @property
    def is_sqlite(self) -> bool:
        return self.config.url.startswith("sqlite")

    def initialize(self) -> None:
        if self._engine is not None:
            self.logger.warning("Database already initialized")
            return

        try:
            self.logger.info("Initializing database engine")

            if self.is_sqlite:
                # single shared connection so in-memory databases survive across sessions
                self._engine = create_engine(
                    self.config.url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                    echo=False,
                )
            else:
                self._engine = create_engine(
                    self.config.url,
                    poolclass=QueuePool,
                    pool_size=self.config.pool_size,
                    max_overflow=self.config.max_overflow,
                    pool_timeout=30,
                    pool_recycle=3600,  # Recycle connections after 1 hour
                    echo=False,  # Set to True for SQL debugging
                )

            self._session_factory = sessionmaker(
                bind=self._engine,
                expire_on_commit=False,  # Keep objects accessible after commit
            )

            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))

            log_with_context(self.logger, INFO, "Database initialized successfully",
                            pool_size=self.config.pool_size,
                            max_overflow=self.config.max_overflow)

        except Exception as e:
            log_with_context(self.logger, ERROR, "Failed to initialize database",
                            error=str(e),
                            exception_type=type(e).__name__)
            raise

    def create_schema(self) -> None:
        from .base import ModelBase
        from . import tables  # noqa: F401  registers every table on ModelBase

        ModelBase.metadata.create_all(self.engine)
        log_with_context(self.logger, INFO, "Database schema created",
                        table_count=len(ModelBase.metadata.tables))

    def shutdown(self) -> None:
        self.logger.info("Shutting down database connections")

        if self._engine:
            self._engine.dispose()
            self._engine = None

        self._session_factory = None
        self.clear_repository_cache()

        self.logger.info("Database shutdown completed")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._session_factory

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        session = self.session_factory()
        try:
            log_with_context(self.logger, DEBUG, "Database session created")
            yield session
        except Exception as e:
            log_with_context(self.logger, ERROR, "Database session error, rolling back",
                            error=str(e),
                            exception_type=type(e).__name__)
            session.rollback()
            raise
        finally:
            session.close()
            log_with_context(self.logger, DEBUG, "Database session closed")

    @contextmanager
    def get_transaction(self) -> Generator[Session, None, None]:
        with self.get_session() as session:
            try:
                yield session
                session.commit()
                log_with_context(self.logger, DEBUG, "Database transaction committed")
            except Exception as e:
                session.rollback()
                log_with_context(self.logger, ERROR, "Database transaction rolled back",
                                error=str(e),
                                exception_type=type(e).__name__)
                raise

    def health_check(self) -> bool:
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            log_with_context(self.logger, ERROR, "Database health check failed",
                            error=str(e),
                            exception_type=type(e).__name__)
            return False

    def _get_or_create_repository(self, repo_class, repo_name):
        """Get cached repository or create new instance"""
        if repo_name not in self._repositories:
            self._repositories[repo_name] = repo_class(self)
        return self._repositories[repo_name]

    def clear_repository_cache(self):
        """Clear the repository cache (useful for testing)"""
        self._repositories.clear()

    # === Entity Repositories ===

    def get_account_repo(self):
        from .repositories.account_repository import AccountRepository
        return self._get_or_create_repository(AccountRepository, 'account')

    def get_token_repo(self):
        from .repositories.token_repository import TokenRepository
        return self._get_or_create_repository(TokenRepository, 'token')

    def get_balance_repo(self):
        from .repositories.balance_repository import AccountBalanceRepository
        return self._get_or_create_repository(AccountBalanceRepository, 'balance')

    def get_balance_snapshot_repo(self):
        from .repositories.balance_repository import AccountBalanceSnapshotRepository
        return self._get_or_create_repository(AccountBalanceSnapshotRepository, 'balance_snapshot')

    def get_transfer_event_repo(self):
        from .repositories.transfer_event_repository import TransferEventRepository
        return self._get_or_create_repository(TransferEventRepository, 'transfer_event')

    def get_module_repo(self):
        from .repositories.module_repository import ModuleRepository
        return self._get_or_create_repository(ModuleRepository, 'module')

    def get_module_snapshot_repo(self):
        from .repositories.module_repository import ModuleSnapshotRepository
        return self._get_or_create_repository(ModuleSnapshotRepository, 'module_snapshot')

    def get_account_module_repo(self):
        from .repositories.module_repository import AccountModuleRepository
        return self._get_or_create_repository(AccountModuleRepository, 'account_module')

    def get_asset_repo(self):
        from .repositories.asset_repository import AssetRepository
        return self._get_or_create_repository(AssetRepository, 'asset')

    def get_module_execution_repo(self):
        from .repositories.module_execution_repository import ModuleExecutionRepository
        return self._get_or_create_repository(ModuleExecutionRepository, 'module_execution')
