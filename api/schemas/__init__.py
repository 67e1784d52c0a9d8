"""
Pydantic schemas for request/response validation
"""
from .company import (
    CompanyCreate,
    CompanyUpdate,
    CompanySearch,
    CompanyOut,
    CompanyJob,
    CompanyDetail,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyDeleteResponse,
)
from .job import (
    JobCreate,
    JobUpdate,
    JobSearch,
    JobOut,
    JobSummary,
    JobDetail,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
    JobDeleteResponse,
)

__all__ = [
    "CompanyCreate",
    "CompanyUpdate",
    "CompanySearch",
    "CompanyOut",
    "CompanyJob",
    "CompanyDetail",
    "CompanyResponse",
    "CompanyDetailResponse",
    "CompanyListResponse",
    "CompanyDeleteResponse",
    "JobCreate",
    "JobUpdate",
    "JobSearch",
    "JobOut",
    "JobSummary",
    "JobDetail",
    "JobResponse",
    "JobDetailResponse",
    "JobListResponse",
    "JobDeleteResponse",
]
