from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .card_controller import router as card_router


__all__ = ["auth_router", "user_router", "card_router"]
