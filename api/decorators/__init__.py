"""
API decorators
"""
from .error_handler import EXCEPTION_MAP, handle_api_errors, status_for

__all__ = ["EXCEPTION_MAP", "handle_api_errors", "status_for"]
