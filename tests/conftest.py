"""
Pytest configuration and shared fixtures.
"""

from decimal import Decimal
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_company_repository, get_job_repository
from api.main import app
from core.exceptions import ValidationError, company_not_found, job_not_found
from core.security import create_token
from core.utils.sql import compile_partial_update


class FakeResult:
    """Mimics the parts of a SQLAlchemy result the repositories use."""

    def __init__(self, rows: List[Dict[str, Any]]):
        self._rows = rows

    def mappings(self):
        return self

    def first(self):
        return self._rows[0] if self._rows else None

    def all(self):
        return list(self._rows)


class FakeConnection:
    """
    Records every statement and replies with queued row lists, in order.

    An exhausted queue answers with no rows.
    """

    def __init__(self, *responses: List[Dict[str, Any]]):
        self.responses = list(responses)
        self.calls: List[tuple] = []

    async def exec_driver_sql(self, sql: str, params: tuple = ()):
        self.calls.append((sql, params))
        rows = self.responses.pop(0) if self.responses else []
        return FakeResult(rows)


class FakeCompanyRepository:
    """In-memory stand-in for CompanyRepository."""

    def __init__(self, companies: Dict[str, Dict[str, Any]], jobs: Dict[int, Dict[str, Any]]):
        self.companies = companies
        self.jobs = jobs

    async def create(self, data):
        if data["handle"] in self.companies:
            raise ValidationError(f"Duplicate company: {data['handle']}")
        self.companies[data["handle"]] = dict(data)
        return dict(data)

    async def find_all(self, criteria=None):
        criteria = criteria or {}
        min_e, max_e = criteria.get("min_employees"), criteria.get("max_employees")
        if min_e is not None and max_e is not None and min_e > max_e:
            raise ValidationError("Min employees cannot be greater than max")
        out = []
        for company in sorted(self.companies.values(), key=lambda c: c["name"]):
            n = company.get("numEmployees")
            if min_e is not None and (n is None or n < min_e):
                continue
            if max_e is not None and (n is None or n > max_e):
                continue
            if "name" in criteria and criteria["name"].lower() not in company["name"].lower():
                continue
            out.append(dict(company))
        return out

    async def get(self, handle):
        if handle not in self.companies:
            raise company_not_found(handle)
        company = dict(self.companies[handle])
        company["jobs"] = [
            {k: j[k] for k in ("id", "title", "salary", "equity")}
            for j in sorted(self.jobs.values(), key=lambda j: j["id"])
            if j["companyHandle"] == handle
        ]
        return company

    async def update(self, handle, data):
        compile_partial_update(data)
        if handle not in self.companies:
            raise company_not_found(handle)
        self.companies[handle].update(data)
        return dict(self.companies[handle])

    async def remove(self, handle):
        if self.companies.pop(handle, None) is None:
            raise company_not_found(handle)
        return handle


class FakeJobRepository:
    """In-memory stand-in for JobRepository."""

    def __init__(self, companies: Dict[str, Dict[str, Any]], jobs: Dict[int, Dict[str, Any]]):
        self.companies = companies
        self.jobs = jobs

    async def create(self, data):
        job_id = max(self.jobs, default=0) + 1
        job = {"id": job_id, **data}
        self.jobs[job_id] = job
        return dict(job)

    async def find_all(self, criteria=None):
        criteria = criteria or {}
        out = []
        for job in sorted(self.jobs.values(), key=lambda j: j["title"]):
            if "min_salary" in criteria and (job["salary"] or 0) < criteria["min_salary"]:
                continue
            if criteria.get("has_equity") is True and not (job["equity"] or 0) > 0:
                continue
            if "title" in criteria and criteria["title"].lower() not in job["title"].lower():
                continue
            company = self.companies.get(job["companyHandle"])
            out.append({**job, "companyName": company["name"] if company else None})
        return out

    async def get(self, job_id):
        if job_id not in self.jobs:
            raise job_not_found(job_id)
        job = dict(self.jobs[job_id])
        job["company"] = self.companies.get(job.pop("companyHandle"))
        return job

    async def update(self, job_id, data):
        compile_partial_update(data)
        if job_id not in self.jobs:
            raise job_not_found(job_id)
        self.jobs[job_id].update(data)
        return dict(self.jobs[job_id])

    async def remove(self, job_id):
        if self.jobs.pop(job_id, None) is None:
            raise job_not_found(job_id)
        return job_id


@pytest.fixture
def store():
    """Two companies and three jobs, shared by the fake repositories."""
    companies = {
        "c1": {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        },
        "c2": {
            "handle": "c2",
            "name": "C2",
            "description": "Desc2",
            "numEmployees": 2,
            "logoUrl": "http://c2.img",
        },
    }
    jobs = {
        1: {"id": 1, "title": "J1", "salary": 100, "equity": Decimal("0.1"), "companyHandle": "c1"},
        2: {"id": 2, "title": "J2", "salary": 200, "equity": Decimal("0.2"), "companyHandle": "c1"},
        3: {"id": 3, "title": "J3", "salary": 300, "equity": None, "companyHandle": "c1"},
    }
    return {"companies": companies, "jobs": jobs}


@pytest.fixture
def client(store):
    """TestClient with the repositories swapped for in-memory fakes."""
    app.dependency_overrides[get_job_repository] = lambda: FakeJobRepository(
        store["companies"], store["jobs"]
    )
    app.dependency_overrides[get_company_repository] = lambda: FakeCompanyRepository(
        store["companies"], store["jobs"]
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}


@pytest.fixture
def make_conn():
    """Factory for FakeConnection: make_conn([row], [], ...)."""
    return FakeConnection
