"""Aggregate router exports."""
from .rpc import router as rpc_router
from .videos import router as videos_router

__all__ = ["rpc_router", "videos_router"]
