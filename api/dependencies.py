"""
FastAPI 依赖项，用于依赖注入
"""

from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncConnection

from core.database import async_db
from .repositories import CompanyRepository, JobRepository


async def get_db() -> AsyncIterator[AsyncConnection]:
    """
    获取处于事务中的数据库连接，请求结束时提交（异常时回滚）

    用法示例:
        @router.get("/endpoint")
        async def endpoint(conn: AsyncConnection = Depends(get_db)):
            ...
    """
    async with async_db.get_connection() as conn:
        yield conn


def get_job_repository(conn: AsyncConnection = Depends(get_db)) -> JobRepository:
    return JobRepository(conn)


def get_company_repository(
    conn: AsyncConnection = Depends(get_db),
) -> CompanyRepository:
    return CompanyRepository(conn)
