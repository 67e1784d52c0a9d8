"""
API错误处理装饰器
"""

import functools
from typing import Callable, Dict, Type

from fastapi import HTTPException, status
from loguru import logger

from core.exceptions import (
    JoblyException,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


# 异常映射表：业务异常 -> HTTP状态码
EXCEPTION_MAP: Dict[Type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
}


def status_for(exc: Exception) -> int:
    """查找异常对应的HTTP状态码，未登记的业务异常视为服务器错误"""
    for exc_type, status_code in EXCEPTION_MAP.items():
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_api_errors(func: Callable):
    """
    统一的API错误处理装饰器

    将业务异常转换为 HTTPException：
        ValidationError -> 400
        NotFoundError -> 404
        UnauthorizedError -> 401
        其他 -> 500

    使用示例:
        @router.get("/{job_id}")
        @handle_api_errors
        async def get_job(...):
            return await repo.get(job_id)
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except JoblyException as e:
            status_code = status_for(e)
            bound = logger.bind(exception_type=type(e).__name__)
            log = bound.warning if status_code < 500 else bound.error
            log(f"[{func.__name__}] {type(e).__name__}: {e}")
            raise HTTPException(status_code=status_code, detail=str(e))

        except Exception as e:
            # 使用 repr() 避免异常信息中的 {} 导致格式化错误
            logger.opt(exception=True).error(
                f"[{func.__name__}] Unexpected error: {e!r}"
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )

    return wrapper
