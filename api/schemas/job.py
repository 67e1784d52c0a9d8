"""
职位相关数据结构

API 使用 camelCase 字段名（companyHandle、minSalary 等），通过别名映射
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .company import CompanyOut


class JobCreate(BaseModel):
    """创建职位请求"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1, description="职位名称")
    salary: Optional[int] = Field(None, ge=0, description="年薪")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="股权比例")
    company_handle: str = Field(
        ..., alias="companyHandle", min_length=1, max_length=25, description="所属公司"
    )


class JobUpdate(BaseModel):
    """
    部分更新职位请求

    id 与 companyHandle 不可修改，出现即视为无效请求
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="股权比例")

    @field_validator("title", mode="before")
    @classmethod
    def reject_null(cls, v):
        """title 列不可为空，显式传 null 视为无效请求"""
        if v is None:
            raise ValueError("title 不能为 null")
        return v


class JobSearch(BaseModel):
    """职位列表查询参数，未知参数会被拒绝"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    min_salary: Optional[int] = Field(None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(None, alias="hasEquity")
    title: Optional[str] = None


class JobOut(BaseModel):
    """职位"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str = Field(..., alias="companyHandle")


class JobSummary(JobOut):
    """职位列表项（附带公司名称）"""

    company_name: Optional[str] = Field(None, alias="companyName")


class JobDetail(BaseModel):
    """职位详情（嵌套所属公司）"""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company: Optional[CompanyOut] = None


class JobResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job": {
                    "id": 1,
                    "title": "Engineer",
                    "salary": 120000,
                    "equity": "0.05",
                    "companyHandle": "acme",
                }
            }
        }
    )

    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobListResponse(BaseModel):
    jobs: List[JobSummary]


class JobDeleteResponse(BaseModel):
    deleted: int
