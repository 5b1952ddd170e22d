import logging

from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.auth import (
    authenticate_user,
    get_current_user,
    login_session,
    logout_session,
)
from app.models.user import User
from app.utils.safe_redirect import safe_redirect_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    next: str = Form("/dashboard"),
    db: Session = Depends(get_db)
):
    """Process login form."""
    user = authenticate_user(db, email.strip(), password)

    if not user:
        logger.warning(f"Failed login for {email}")
        return JSONResponse({"error": "Invalid email or password"}, status_code=401)

    login_session(request, user)
    logger.info(f"User {user.id} logged in")
    return RedirectResponse(url=safe_redirect_url(next, "/dashboard"), status_code=303)


@router.post("/logout")
async def logout(request: Request):
    """Log out the current user."""
    logout_session(request)
    return {"ok": True}


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """Return the signed-in user."""
    return user.to_dict()
