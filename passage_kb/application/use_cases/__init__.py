from .build_context import BuildContextUseCase, ContextResult

__all__ = [
    "BuildContextUseCase",
    "ContextResult",
]
