"""
公司数据仓储 (Company Repository)
"""

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from core.exceptions import ValidationError, company_not_found
from core.utils.sql import (
    bind_key,
    compile_company_filters,
    compile_partial_update,
)
from .base_repository import BaseRepository


COMPANY_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", '
    'logo_url AS "logoUrl"'
)

# API 字段名 -> 列名
COMPANY_FIELD_MAPPING: Mapping[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyRepository(BaseRepository):
    """公司数据仓储"""

    async def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        创建公司

        Args:
            data: { handle, name, description, numEmployees, logoUrl }

        Raises:
            ValidationError: handle 已存在
        """
        duplicate = await self._fetch_one(
            "SELECT handle FROM companies WHERE handle = $1", [data["handle"]]
        )
        if duplicate is not None:
            raise ValidationError(f"Duplicate company: {data['handle']}")

        company = await self._fetch_one(
            f"""INSERT INTO companies
                (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [
                data["handle"],
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        logger.info(f"公司已创建: handle={company['handle']}")
        return company

    async def find_all(
        self, criteria: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        查询公司列表，按名称排序

        Args:
            criteria: 可选过滤条件 name / min_employees / max_employees

        Raises:
            ValidationError: min_employees 大于 max_employees
        """
        where, values = compile_company_filters(criteria)
        parts = [f"SELECT {COMPANY_COLUMNS} FROM companies", where, "ORDER BY name"]
        return await self._fetch_all(" ".join(part for part in parts if part), values)

    async def get(self, handle: str) -> Dict[str, Any]:
        """
        根据 handle 获取公司及其职位列表

        Raises:
            NotFoundError: 公司不存在
        """
        company = await self._fetch_one(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1", [handle]
        )
        if company is None:
            raise company_not_found(handle)

        company["jobs"] = await self._fetch_all(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        return company

    async def update(self, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        部分更新公司信息

        Args:
            data: 可包含 { name, description, numEmployees, logoUrl }

        Raises:
            ValidationError: data 为空
            NotFoundError: 公司不存在
        """
        compiled = compile_partial_update(data, COMPANY_FIELD_MAPPING)
        handle_placeholder, values = bind_key(compiled, handle)

        company = await self._fetch_one(
            f"""UPDATE companies
                SET {compiled.clause}
                WHERE handle = {handle_placeholder}
                RETURNING {COMPANY_COLUMNS}""",
            values,
        )
        if company is None:
            raise company_not_found(handle)

        logger.debug(f"公司已更新: handle={handle}, fields={list(data)}")
        return company

    async def remove(self, handle: str) -> str:
        """删除公司（其职位级联删除），返回被删除的 handle"""
        row = await self._fetch_one(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle]
        )
        if row is None:
            raise company_not_found(handle)

        logger.info(f"公司已删除: handle={handle}")
        return row["handle"]
