import logging
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware
from dotenv import load_dotenv

load_dotenv()

from app.routes import (
    auth_router,
    dashboard_router,
    orders_router,
)
from app.auth import SECRET_KEY, SESSION_EXPIRE_MINUTES
from app.database import init_db, DATABASE_URL

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Flix AT Tracker",
    description="Auto transport order tracking",
    version="1.0.0"
)

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie="session",
    max_age=SESSION_EXPIRE_MINUTES * 60,
    same_site="lax",
)

# Include routers
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(orders_router)


@app.on_event("startup")
def on_startup():
    """Ensure DB is reachable and initialized at startup. Creates missing
    tables; if initialization fails the app will raise and stop with a
    clear error message.
    """
    try:
        init_db()
    except Exception as e:
        # Re-raise as RuntimeError so the server fails loudly
        raise RuntimeError(
            f"Database initialization failed for DATABASE_URL={DATABASE_URL}: {e}"
        ) from e
    logger.info("Database initialized")


@app.get("/", include_in_schema=False)
async def index():
    return RedirectResponse(url="/dashboard", status_code=303)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
