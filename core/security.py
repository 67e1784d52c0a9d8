"""
JWT 令牌签发与校验（PyJWT）
"""

import time
from typing import Any, Dict

import jwt

from .config import get_settings


def create_token(username: str, is_admin: bool = False) -> str:
    """
    签发访问令牌

    参数:
        username: 用户名，写入 username 声明
        is_admin: 是否管理员，写入 isAdmin 声明

    返回:
        HS256 签名的 JWT 字符串
    """
    settings = get_settings()
    iat = int(time.time())
    payload = {
        "username": username,
        "isAdmin": bool(is_admin),
        "iat": iat,
        "exp": iat + settings.ACCESS_TOKEN_TTL,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """
    校验令牌签名与有效期，返回声明

    异常:
        jwt.InvalidTokenError: 签名错误、过期或缺少必需声明
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat", "username"]},
    )
