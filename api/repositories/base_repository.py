"""
基础 Repository - 提供参数化 SQL 的通用执行模式

连接由调用方注入（见 api.dependencies），仓储不持有全局数据库句柄，
便于测试时替换为假连接
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection
from loguru import logger


class BaseRepository:
    """
    基础仓储类

    所有 SQL 使用 $1, $2 ... 位置参数，参数值单独传给驱动，
    从不拼接进 SQL 文本

    使用方法:
        class JobRepository(BaseRepository):
            async def get(self, id):
                return await self._fetch_one("SELECT ... WHERE id = $1", [id])
    """

    def __init__(self, conn: AsyncConnection):
        self.conn = conn

    async def _execute(self, sql: str, values: Sequence[Any] = ()):
        """
        执行一条参数化语句

        自动记录耗时与失败信息，异常原样向上抛出
        """
        start_time = datetime.utcnow()
        try:
            result = await self.conn.exec_driver_sql(sql, tuple(values))
        except Exception as e:
            logger.error(f"[{type(self).__name__}] DB操作失败: {e!r}")
            raise
        duration = (datetime.utcnow() - start_time).total_seconds()
        logger.debug(f"[{type(self).__name__}] DB操作耗时: {duration:.3f}s")
        return result

    async def _fetch_one(
        self, sql: str, values: Sequence[Any] = ()
    ) -> Optional[Dict[str, Any]]:
        """执行查询并返回第一行（字典），没有结果时返回 None"""
        result = await self._execute(sql, values)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def _fetch_all(
        self, sql: str, values: Sequence[Any] = ()
    ) -> List[Dict[str, Any]]:
        """执行查询并返回所有行（字典列表），没有结果时返回空列表"""
        result = await self._execute(sql, values)
        return [dict(row) for row in result.mappings().all()]
