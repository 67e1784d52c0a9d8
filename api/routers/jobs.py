"""
职位管理 API 端点
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from loguru import logger

from ..auth import require_admin
from ..decorators import handle_api_errors
from ..dependencies import get_job_repository
from ..repositories import JobRepository
from ..schemas import (
    JobCreate,
    JobUpdate,
    JobSearch,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
    JobDeleteResponse,
)


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def create_job(
    request: JobCreate, repo: JobRepository = Depends(get_job_repository)
):
    """
    创建职位（需要管理员权限）

    请求体: { title, salary, equity, companyHandle }
    """
    job = await repo.create(request.model_dump(by_alias=True))
    return {"job": job}


@router.get("", response_model=JobListResponse)
@handle_api_errors
async def list_jobs(
    search: Annotated[JobSearch, Query()],
    repo: JobRepository = Depends(get_job_repository),
):
    """
    查询职位列表，按名称排序

    可选过滤条件:
    - minSalary: 最低薪资（含）
    - hasEquity: 为 true 时只返回有股权的职位
    - title: 名称模糊匹配（不区分大小写）
    """
    criteria = search.model_dump(exclude_none=True)
    jobs = await repo.find_all(criteria)
    logger.debug(f"职位查询: criteria={criteria}, count={len(jobs)}")
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailResponse)
@handle_api_errors
async def get_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    """
    查询职位详情（含所属公司）

    Raises:
        404: 职位未找到
    """
    return {"job": await repo.get(job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def update_job(
    job_id: int,
    request: JobUpdate,
    repo: JobRepository = Depends(get_job_repository),
):
    """
    部分更新职位（需要管理员权限）

    只修改请求中出现的字段；请求体为空返回 400
    """
    job = await repo.update(job_id, request.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete(
    "/{job_id}",
    response_model=JobDeleteResponse,
    dependencies=[Depends(require_admin)],
)
@handle_api_errors
async def delete_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    """删除职位（需要管理员权限）"""
    deleted = await repo.remove(job_id)
    return {"deleted": deleted}
