"""
Utility modules for Jobly
"""
from .logger import setup_logger
from .sql import (
    CompiledClause,
    bind_key,
    compile_company_filters,
    compile_job_filters,
    compile_partial_update,
)

__all__ = [
    "setup_logger",
    "CompiledClause",
    "bind_key",
    "compile_company_filters",
    "compile_job_filters",
    "compile_partial_update",
]
