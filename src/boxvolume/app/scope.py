"""
View Model Scope
================
Owns presenter instances independently of the windows that display them.

A window asks the store for its presenter on construction. Closing the window
does not destroy the presenter, so the next window created on the same store
picks up the latest state. The owner ends the scope with ``clear()``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

VM = TypeVar("VM")


class ViewModelStore:
    def __init__(self) -> None:
        self._view_models: dict[str, Any] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._view_models

    def __len__(self) -> int:
        return len(self._view_models)

    def keys(self) -> Iterator[str]:
        return iter(list(self._view_models))

    def get(self, key: str, factory: Callable[[], VM]) -> VM:
        """Return the presenter stored under ``key``, creating it with ``factory`` if missing."""
        if key in self._view_models:
            return self._view_models[key]

        view_model = factory()
        if view_model is None:
            raise ValueError(f"Factory for '{key}' returned None.")
        self._view_models[key] = view_model
        logger.debug("Created view model '%s'.", key)
        return view_model

    def get_view_model(self, cls: type[VM]) -> VM:
        return self.get(cls.__qualname__, cls)

    def clear(self) -> None:
        """
        End the scope: notify every presenter and forget them.

        Every presenter is torn down even if an earlier one fails; the first
        failure is re-raised once the store is empty.
        """
        first_error: Optional[Exception] = None
        try:
            for key, view_model in self._view_models.items():
                on_cleared = getattr(view_model, "on_cleared", None)
                if not callable(on_cleared):
                    continue
                try:
                    on_cleared()
                except Exception as e:
                    logger.error("Clearing view model '%s' failed: %s", key, e)
                    if first_error is None:
                        first_error = e
                else:
                    logger.debug("Cleared view model '%s'.", key)
        finally:
            self._view_models.clear()

        if first_error is not None:
            raise first_error
