"""Lifecycle: одноразовая инициализация экземпляра (deploy-then-initialize)."""

from .initializer import InitTransitionResult, Initializer

__all__ = [
    "Initializer",
    "InitTransitionResult",
]
