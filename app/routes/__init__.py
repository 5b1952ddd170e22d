from app.routes.auth import router as auth_router
from app.routes.dashboard import router as dashboard_router
from app.routes.orders import router as orders_router

__all__ = [
    'auth_router',
    'dashboard_router',
    'orders_router',
]
