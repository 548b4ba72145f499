"""Filter registry with auto-discovery of HardFilter subclasses."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType

from recommendation_engine.filters.base import HardFilter

logger = logging.getLogger(__name__)


def _defined_filters(module: ModuleType) -> list[type[HardFilter]]:
    """Concrete HardFilter classes *defined* in ``module``.

    Filter modules import helpers and sometimes other filters; a class is
    only picked up in the module that defines it (``__module__`` check), so
    re-exports never register a filter twice under a second import path.
    """
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, HardFilter)
        and not inspect.isabstract(obj)
        and obj.__module__ == module.__name__
    ]


class FilterRegistry:
    """Holds the hard filters the engine applies, keyed by ``filter_id``.

    ``discover_filters()`` imports every module under
    ``recommendation_engine.filters`` and registers one instance of each
    concrete filter found there. Adding a filter means dropping a module
    into ``filters/level/`` or ``filters/recovery/``. Registering a second
    filter with an existing id replaces the first.
    """

    def __init__(self) -> None:
        self._filters: dict[str, HardFilter] = {}

    def discover_filters(self) -> None:
        import recommendation_engine.filters as filters_pkg

        found = 0
        for info in pkgutil.walk_packages(
            filters_pkg.__path__, prefix=f"{filters_pkg.__name__}."
        ):
            try:
                module = importlib.import_module(info.name)
            except ImportError as exc:
                logger.warning("Skipping filter module %s: %s", info.name, exc)
                continue
            for filter_cls in _defined_filters(module):
                self.register(filter_cls())
                found += 1
        logger.debug("Discovered %d hard filters", found)

    def register(self, hard_filter: HardFilter) -> None:
        self._filters[hard_filter.filter_id] = hard_filter

    def get(self, filter_id: str) -> HardFilter | None:
        return self._filters.get(filter_id)

    def get_all_filters(self) -> list[HardFilter]:
        """Registered filters in evaluation order (ascending ``order``)."""
        return sorted(self._filters.values(), key=lambda f: f.order)

    @property
    def filter_ids(self) -> list[str]:
        return list(self._filters)
