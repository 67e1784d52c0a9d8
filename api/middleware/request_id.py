"""
请求ID追踪中间件
"""
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from loguru import logger


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    为每个请求分配追踪ID（优先使用客户端传入的 X-Request-ID），
    在请求处理期间绑定到日志上下文，并通过响应头返回ID和耗时
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id

        start_time = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            logger.info(f"→ {request.method} {request.url.path}")
            try:
                response = await call_next(request)
            except Exception:
                duration = time.perf_counter() - start_time
                logger.opt(exception=True).error(
                    f"✗ {request.method} {request.url.path} failed after {duration:.3f}s"
                )
                raise

            duration = time.perf_counter() - start_time
            logger.info(
                f"← {request.method} {request.url.path} "
                f"{response.status_code} ({duration:.3f}s)"
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response
