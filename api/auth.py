"""
认证依赖项

令牌通过 Authorization: Bearer <token> 传入。无效令牌按匿名用户处理，
是否放行由具体的依赖项决定
"""

from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger

from core.exceptions import UnauthorizedError
from core.security import verify_token

bearer = HTTPBearer(auto_error=False)


def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[Dict[str, Any]]:
    """解析令牌声明；未携带或无效时返回 None"""
    if creds is None or creds.scheme.lower() != "bearer":
        return None
    try:
        return verify_token(creds.credentials)
    except jwt.InvalidTokenError as e:
        logger.debug(f"忽略无效令牌: {e}")
        return None


def require_admin(
    user: Optional[Dict[str, Any]] = Depends(get_current_user),
) -> Dict[str, Any]:
    """要求管理员令牌（isAdmin 为 true）"""
    if user is None or user.get("isAdmin") is not True:
        raise UnauthorizedError()
    return user
