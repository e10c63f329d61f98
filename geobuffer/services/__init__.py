"""Service-layer helpers used by the CLI and tests."""

from .buffer import BufferService

__all__ = ["BufferService"]
