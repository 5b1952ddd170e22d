from app.auth.utils import (
    verify_password,
    get_password_hash,
    get_current_user,
    get_current_user_optional,
    authenticate_user,
    login_session,
    logout_session,
    SECRET_KEY,
    SESSION_EXPIRE_MINUTES,
)

__all__ = [
    "verify_password",
    "get_password_hash",
    "get_current_user",
    "get_current_user_optional",
    "authenticate_user",
    "login_session",
    "logout_session",
    "SECRET_KEY",
    "SESSION_EXPIRE_MINUTES",
]
