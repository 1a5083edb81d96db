"""View layer (routing) for the receipt bridge service."""


from .pages import router as pages_router
from .printing import router as print_router


__all__ = [
    "pages_router",
    "print_router",
]
