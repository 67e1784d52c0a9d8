"""
数据库连接管理 - 支持异步和同步两种模式
- 异步用于 FastAPI（使用 asyncpg）
- 同步用于初始化脚本（使用 psycopg2）

运行时查询使用 $1, $2 ... 形式的位置参数，通过 exec_driver_sql 直接交给驱动执行
"""

from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator, Optional

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from loguru import logger

from . import models  # noqa: F401  注册表定义到 SQLModel.metadata
from .config import get_settings
from .exceptions import DatabaseNotInitializedException


class AsyncDatabaseManager:
    """
    FastAPI 异步数据库连接管理器

    只负责引擎和连接池的生命周期；连接通过依赖注入交给仓储层，
    仓储本身不持有任何全局状态
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None

    def init(self, database_url: Optional[str] = None) -> None:
        """初始化异步数据库引擎"""
        if self._engine is not None:
            logger.warning("AsyncDatabaseManager 已经初始化过")
            return

        settings = get_settings()
        database_url = database_url or settings.get_database_url(async_driver=True)

        self._engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=10,
            pool_pre_ping=True,  # 使用前验证连接
            pool_recycle=3600,
        )

        logger.info("异步数据库管理器初始化完成")

    async def close(self) -> None:
        """关闭数据库引擎并清理连接"""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            logger.info("异步数据库连接已关闭")

    @asynccontextmanager
    async def get_connection(self) -> AsyncIterator[AsyncConnection]:
        """
        获取一个处于事务中的异步连接（上下文管理器）

        正常退出时提交，异常时回滚

        用法示例：
            async with async_db.get_connection() as conn:
                result = await conn.exec_driver_sql(sql, (value,))
        """
        if self._engine is None:
            raise DatabaseNotInitializedException("AsyncDatabaseManager")

        async with self._engine.begin() as conn:
            yield conn

    def is_initialized(self) -> bool:
        """检查是否已初始化"""
        return self._engine is not None


class SyncDatabaseManager:
    """初始化脚本使用的同步数据库连接管理器"""

    def __init__(self):
        self._engine: Optional[Engine] = None

    def init(self, database_url: Optional[str] = None) -> None:
        if self._engine is not None:
            logger.warning("SyncDatabaseManager 已经初始化过")
            return

        database_url = database_url or get_settings().get_database_url(
            async_driver=False
        )
        self._engine = create_engine(database_url, echo=False, pool_pre_ping=True)
        logger.info("同步数据库管理器初始化完成")

    def close(self) -> None:
        if self._engine:
            self._engine.dispose()
            self._engine = None
            logger.info("同步数据库连接已关闭")

    @contextmanager
    def get_connection(self) -> Iterator[Connection]:
        """获取一个处于事务中的同步连接"""
        if self._engine is None:
            raise DatabaseNotInitializedException("SyncDatabaseManager")

        with self._engine.begin() as conn:
            yield conn

    def create_tables(self, drop_existing: bool = False) -> None:
        """创建所有数据库表，可选先删除旧表"""
        if self._engine is None:
            raise DatabaseNotInitializedException("SyncDatabaseManager")

        if drop_existing:
            SQLModel.metadata.drop_all(self._engine)
            logger.info("旧数据库表已删除")

        SQLModel.metadata.create_all(self._engine)
        logger.info("数据库表已创建")


# 全局实例（仅在应用生命周期与依赖项中使用）
async_db = AsyncDatabaseManager()
sync_db = SyncDatabaseManager()
