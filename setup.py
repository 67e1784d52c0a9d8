"""
Jobly 安装配置
"""
from setuptools import setup, find_packages

setup(
    name="jobly-api",
    version="1.0.0",
    description="职位与公司管理 REST API",
    author="Jobly Team",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.115",
        "uvicorn[standard]>=0.29",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "sqlalchemy[asyncio]>=2.0.20",
        "sqlmodel>=0.0.16",
        "asyncpg>=0.29",
        "psycopg2-binary>=2.9",
        "loguru>=0.7",
        "PyJWT>=2.8",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
        ],
    },
    entry_points={
        "console_scripts": [
            "jobly-api=api.main:main",
        ],
    },
)
