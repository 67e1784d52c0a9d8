"""
SQLModel 数据库模型
仅用于建表（开发/测试）；运行时查询使用参数化 SQL
"""
from decimal import Decimal
from typing import Optional, List

from sqlmodel import Field, SQLModel, Relationship, Column
from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)


class Company(SQLModel, table=True):
    """公司表"""

    __tablename__ = "companies"

    handle: str = Field(
        sa_column=Column(String(25), primary_key=True),
        description="公司唯一标识（小写短名）",
    )
    name: str = Field(
        sa_column=Column(Text, nullable=False, unique=True),
        description="公司名称",
    )
    num_employees: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, CheckConstraint("num_employees >= 0")),
        description="员工人数",
    )
    description: str = Field(sa_column=Column(Text, nullable=False), description="简介")
    logo_url: Optional[str] = Field(
        default=None, sa_column=Column(Text), description="Logo 地址"
    )

    jobs: List["Job"] = Relationship(
        back_populates="company",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class Job(SQLModel, table=True):
    """职位表"""

    __tablename__ = "jobs"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="职位ID",
    )
    title: str = Field(sa_column=Column(Text, nullable=False), description="职位名称")
    salary: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, CheckConstraint("salary >= 0")),
        description="年薪",
    )
    # 股权比例，0 到 1 之间
    equity: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric, CheckConstraint("equity <= 1.0")),
        description="股权比例",
    )
    company_handle: str = Field(
        sa_column=Column(
            String(25),
            ForeignKey("companies.handle", ondelete="CASCADE"),
            nullable=False,
        ),
        description="所属公司",
    )

    company: Optional[Company] = Relationship(back_populates="jobs")

    __table_args__ = (
        Index("idx_job_title", "title"),
        Index("idx_job_company_handle", "company_handle"),
    )
