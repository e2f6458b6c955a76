from .router import auth_router, router

__all__ = ["auth_router", "router"]
