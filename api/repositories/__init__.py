"""
数据库仓储层 (Repository Layer)

职责：
- 封装所有数据库操作（参数化 SQL）
- 将“按主键操作未命中”统一转换为 NotFoundError
- 连接由外部注入，便于测试和mock
"""

from .base_repository import BaseRepository
from .company_repository import CompanyRepository
from .job_repository import JobRepository

__all__ = ["BaseRepository", "CompanyRepository", "JobRepository"]
