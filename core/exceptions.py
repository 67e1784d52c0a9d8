"""
Jobly 的自定义异常
"""
from typing import Any


class JoblyException(Exception):
    """Jobly 基础异常类"""
    pass


# ========== 数据库异常 ==========

class DatabaseException(JoblyException):
    """数据库相关异常基类"""
    pass


class DatabaseNotInitializedException(DatabaseException):
    """数据库未初始化异常"""
    def __init__(self, manager_name: str = "DatabaseManager"):
        super().__init__(
            f"{manager_name} not initialized. Call init() first."
        )


# ========== 请求异常 ==========

class ValidationError(JoblyException):
    """客户端输入无效（例如部分更新没有提供任何字段）"""
    def __init__(self, message: str = "Bad Request"):
        self.message = message
        super().__init__(message)


class NotFoundError(JoblyException):
    """按主键查找、更新或删除时未命中任何记录"""
    def __init__(self, message: str = "Not Found"):
        self.message = message
        super().__init__(message)


class UnauthorizedError(JoblyException):
    """缺少有效令牌，或令牌没有所需权限"""
    def __init__(self, message: str = "Unauthorized"):
        self.message = message
        super().__init__(message)


def job_not_found(job_id: Any) -> NotFoundError:
    return NotFoundError(f"No job: {job_id}")


def company_not_found(handle: Any) -> NotFoundError:
    return NotFoundError(f"No company: {handle}")
