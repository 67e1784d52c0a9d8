#!/usr/bin/env python3
"""
数据库初始化脚本
创建所有表，并可选地插入示例数据
"""

import sys
from decimal import Decimal
from pathlib import Path

# 添加项目根目录到PATH
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger
from sqlalchemy import insert, select

from core.config import get_settings
from core.database import sync_db
from core.models import Company, Job
from core.utils.logger import setup_logger


SAMPLE_COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "num_employees": 245,
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "logo_url": "https://jobly.example.com/logos/logo3.png",
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
]

SAMPLE_JOBS = [
    {
        "title": "Conservator, furniture",
        "salary": 110000,
        "equity": Decimal("0"),
        "company_handle": "anderson-arias-morrow",
    },
    {
        "title": "Information officer",
        "salary": 200000,
        "equity": Decimal("0.05"),
        "company_handle": "anderson-arias-morrow",
    },
    {
        "title": "Consulting civil engineer",
        "salary": 60000,
        "equity": None,
        "company_handle": "bauer-gallagher",
    },
]


def create_tables(drop_existing: bool = False):
    """创建所有数据库表"""
    logger.info("正在创建数据库表...")

    try:
        sync_db.create_tables(drop_existing=drop_existing)
        logger.info("数据库表创建成功")
    except Exception as e:
        logger.error(f"创建数据库表失败: {e}")
        raise


def seed_sample_data():
    """插入示例公司与职位（公司已存在时跳过）"""
    logger.info("正在插入示例数据...")

    with sync_db.get_connection() as conn:
        existing = set(conn.execute(select(Company.__table__.c.handle)).scalars())
        companies = [c for c in SAMPLE_COMPANIES if c["handle"] not in existing]
        if not companies:
            logger.info("示例公司已存在，跳过")
            return

        conn.execute(insert(Company.__table__), companies)
        handles = {c["handle"] for c in companies}
        jobs = [j for j in SAMPLE_JOBS if j["company_handle"] in handles]
        if jobs:
            conn.execute(insert(Job.__table__), jobs)

        logger.info(f"已插入 {len(companies)} 家公司, {len(jobs)} 个职位")


def main():
    """主初始化流程"""
    import argparse

    parser = argparse.ArgumentParser(description="Jobly 数据库初始化工具")
    parser.add_argument("--drop", action="store_true", help="先删除已有的表")
    parser.add_argument("--seed", action="store_true", help="插入示例数据")
    args = parser.parse_args()

    setup_logger("INFO")

    logger.info("=== 数据库初始化 ===")

    settings = get_settings()
    logger.info(f"数据库: {settings.POSTGRES_DB}")
    logger.info(f"主机: {settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}")

    try:
        sync_db.init()
        create_tables(drop_existing=args.drop)

        if args.seed:
            seed_sample_data()

        logger.info("=== 数据库初始化成功完成 ===")

    except Exception as e:
        logger.error(f"数据库初始化失败: {e}")
        sys.exit(1)

    finally:
        sync_db.close()


if __name__ == "__main__":
    main()
