"""
FastAPI 主入口
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from core.config import get_settings
from core.database import async_db
from core.exceptions import JoblyException
from core.utils.logger import setup_logger
from .decorators import status_for
from .middleware import RequestIDMiddleware
from .routers import companies_router, jobs_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    应用生命周期管理器（启动与关闭事件）
    """
    settings = get_settings()

    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("启动 Jobly API 服务")

    settings.ensure_directories()

    async_db.init()
    logger.info("数据库已初始化")

    logger.info(f"API 服务已启动，监听 {settings.API_HOST}:{settings.API_PORT}")

    yield

    logger.info("正在关闭 Jobly API 服务")
    await async_db.close()
    logger.info("API 服务已停止")


app = FastAPI(
    title="Jobly",
    description="职位与公司管理 - REST API",
    version="1.0.0",
    lifespan=lifespan,
)

# 中间件（最后添加的最先执行）
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(companies_router)
app.include_router(jobs_router)


@app.get("/", status_code=status.HTTP_200_OK)
async def root():
    """根接口 - 返回 API 信息"""
    return {
        "service": "Jobly API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """健康检查接口"""
    return {
        "status": "healthy",
        "service": "jobly-api",
        "database": async_db.is_initialized(),
    }


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """请求体/查询参数校验失败统一返回 400"""
    logger.warning(f"请求校验失败: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(JoblyException)
async def jobly_exception_handler(request: Request, exc: JoblyException):
    """依赖项（如认证）中抛出的业务异常"""
    return JSONResponse(status_code=status_for(exc), content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """全局异常处理"""
    logger.opt(exception=exc).error(f"未处理的异常: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "服务器内部错误"},
    )


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        workers=settings.API_WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
