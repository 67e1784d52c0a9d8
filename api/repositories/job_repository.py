"""
职位数据仓储 (Job Repository)

封装 jobs 表的所有数据库操作
"""

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from core.exceptions import job_not_found
from core.utils.sql import bind_key, compile_job_filters, compile_partial_update
from .base_repository import BaseRepository


JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

LIST_QUERY = """SELECT j.id,
                       j.title,
                       j.salary,
                       j.equity,
                       j.company_handle AS "companyHandle",
                       c.name AS "companyName"
                FROM jobs j
                    LEFT JOIN companies AS c ON c.handle = j.company_handle"""


class JobRepository(BaseRepository):
    """职位数据仓储"""

    async def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        创建职位

        Args:
            data: { title, salary, equity, companyHandle }

        Returns:
            { id, title, salary, equity, companyHandle }
        """
        job = await self._fetch_one(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [
                data["title"],
                data.get("salary"),
                data.get("equity"),
                data["companyHandle"],
            ],
        )
        logger.info(f"职位已创建: id={job['id']}, company={job['companyHandle']}")
        return job

    async def find_all(
        self, criteria: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        查询职位列表，按职位名称排序

        Args:
            criteria: 可选过滤条件 min_salary / has_equity / title

        Returns:
            [{ id, title, salary, equity, companyHandle, companyName }, ...]
            没有匹配时返回空列表
        """
        where, values = compile_job_filters(criteria)
        parts = [LIST_QUERY, where, "ORDER BY title"]
        sql = " ".join(part for part in parts if part)
        return await self._fetch_all(sql, values)

    async def get(self, job_id: int) -> Dict[str, Any]:
        """
        根据ID获取职位及其所属公司

        Returns:
            { id, title, salary, equity, company }
            company 为 { handle, name, description, numEmployees, logoUrl }

        Raises:
            NotFoundError: 职位不存在（此时不会查询公司）
        """
        job = await self._fetch_one(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            [job_id],
        )
        if job is None:
            raise job_not_found(job_id)

        company = await self._fetch_one(
            """SELECT handle,
                      name,
                      description,
                      num_employees AS "numEmployees",
                      logo_url AS "logoUrl"
               FROM companies
               WHERE handle = $1""",
            [job.pop("companyHandle")],
        )
        job["company"] = company
        return job

    async def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        部分更新：只修改 data 中提供的字段

        Args:
            data: 可包含 { title, salary, equity }

        Raises:
            ValidationError: data 为空
            NotFoundError: 职位不存在
        """
        compiled = compile_partial_update(data, {})
        id_placeholder, values = bind_key(compiled, job_id)

        job = await self._fetch_one(
            f"""UPDATE jobs
                SET {compiled.clause}
                WHERE id = {id_placeholder}
                RETURNING {JOB_COLUMNS}""",
            values,
        )
        if job is None:
            raise job_not_found(job_id)

        logger.debug(f"职位已更新: id={job_id}, fields={list(data)}")
        return job

    async def remove(self, job_id: int) -> int:
        """
        删除职位，返回被删除的ID

        Raises:
            NotFoundError: 职位不存在
        """
        row = await self._fetch_one(
            """DELETE
               FROM jobs
               WHERE id = $1
               RETURNING id""",
            [job_id],
        )
        if row is None:
            raise job_not_found(job_id)

        logger.info(f"职位已删除: id={job_id}")
        return row["id"]
