"""
公司管理 API 端点
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from ..auth import require_admin
from ..decorators import handle_api_errors
from ..dependencies import get_company_repository
from ..repositories import CompanyRepository
from ..schemas import (
    CompanyCreate,
    CompanyUpdate,
    CompanySearch,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyDeleteResponse,
)


router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def create_company(
    request: CompanyCreate,
    repo: CompanyRepository = Depends(get_company_repository),
):
    """创建公司（需要管理员权限），handle 重复返回 400"""
    company = await repo.create(request.model_dump(by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
@handle_api_errors
async def list_companies(
    search: Annotated[CompanySearch, Query()],
    repo: CompanyRepository = Depends(get_company_repository),
):
    """
    查询公司列表

    可选过滤条件:
    - name: 名称模糊匹配（不区分大小写）
    - minEmployees / maxEmployees: 员工人数范围，min 大于 max 时返回 400
    """
    companies = await repo.find_all(search.model_dump(exclude_none=True))
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse)
@handle_api_errors
async def get_company(
    handle: str, repo: CompanyRepository = Depends(get_company_repository)
):
    """查询公司详情（含职位列表）"""
    return {"company": await repo.get(handle)}


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def update_company(
    handle: str,
    request: CompanyUpdate,
    repo: CompanyRepository = Depends(get_company_repository),
):
    """部分更新公司（需要管理员权限）"""
    company = await repo.update(
        handle, request.model_dump(exclude_unset=True, by_alias=True)
    )
    return {"company": company}


@router.delete(
    "/{handle}",
    response_model=CompanyDeleteResponse,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def delete_company(
    handle: str, repo: CompanyRepository = Depends(get_company_repository)
):
    """删除公司及其职位（需要管理员权限）"""
    return {"deleted": await repo.remove(handle)}
