"""Base classes for configuration and state models.

- Closeable Protocol for resource cleanup
- BaseCloseable, which closes its Closeable children
- BaseConfig and BaseState, semantic markers for the two halves
  of State

Kept apart from config.py so that log.py can use them without a
circular import.
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Closeable(Protocol):
    """Protocol for objects that support close()."""

    def close(self) -> None:
        """Release resources."""
        ...


class BaseCloseable(BaseModel):
    """Pydantic model that closes its Closeable fields.

    Usable as a context manager. close() visits every field and
    calls close() on those that have it, carrying on past
    failures so one broken child cannot leak the others:
    Config.close() → Logger.close() → Sink.close()
    """

    def close(self):
        """Close all closeable child objects."""
        for field_name in self.__class__.model_fields:
            child = getattr(self, field_name, None)
            if child is None:
                continue

            if isinstance(child, Closeable):
                try:
                    child.close()
                except Exception as e:
                    print(
                        f"Warning: Error closing {field_name}: {e}",
                        file=sys.stderr,
                    )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # noqa: U100
        self.close()
        return False


class BaseConfig(BaseCloseable):
    """Configuration section (loaded from YAML/env/CLI)."""
    pass


class BaseState(BaseCloseable):
    """Runtime state section (mutated while a workflow runs)."""
    pass


__all__ = ["Closeable", "BaseCloseable", "BaseConfig", "BaseState"]
