"""
公司相关数据结构
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


URL_PATTERN = r"^https?://\S+$"


class CompanyCreate(BaseModel):
    """创建公司请求"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    handle: str = Field(..., min_length=1, max_length=25, description="公司唯一标识")
    name: str = Field(..., min_length=1, description="公司名称")
    description: str = Field(..., description="简介")
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0)
    logo_url: Optional[str] = Field(None, alias="logoUrl", pattern=URL_PATTERN)

    @field_validator("handle")
    @classmethod
    def validate_handle(cls, v: str) -> str:
        """handle 只允许小写字母、数字和连字符"""
        if not all(ch.islower() or ch.isdigit() or ch == "-" for ch in v):
            raise ValueError("handle 只能包含小写字母、数字和连字符")
        return v


class CompanyUpdate(BaseModel):
    """部分更新公司请求，handle 不可修改"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0)
    logo_url: Optional[str] = Field(None, alias="logoUrl", pattern=URL_PATTERN)

    @field_validator("name", "description", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        """name、description 列不可为空，显式传 null 视为无效请求"""
        if v is None:
            raise ValueError(f"{info.field_name} 不能为 null")
        return v


class CompanySearch(BaseModel):
    """公司列表查询参数，未知参数会被拒绝"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Optional[str] = None
    min_employees: Optional[int] = Field(None, alias="minEmployees", ge=0)
    max_employees: Optional[int] = Field(None, alias="maxEmployees", ge=0)


class CompanyOut(BaseModel):
    """公司"""

    model_config = ConfigDict(populate_by_name=True)

    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")


class CompanyJob(BaseModel):
    """公司详情中的职位"""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetail(CompanyOut):
    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


class CompanyDeleteResponse(BaseModel):
    deleted: str
