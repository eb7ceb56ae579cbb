"""BaseService: foundation for all airules services.

Every service receives a :class:`RuleLibrary` at construction time. The
library owns all filesystem access; services turn its answers and its
exceptions into :class:`ServiceResult` values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from airules.config.settings import RulesSettings
    from airules.infrastructure.library import RuleLibrary


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LookupService(BaseService):
            def show(self, query: str) -> ServiceResult:
                path = self._library.locate([query])
                ...
    """

    def __init__(self, library: RuleLibrary) -> None:
        self._library = library

    @property
    def settings(self) -> RulesSettings:
        return self._library.settings

    def _meta(self) -> dict[str, str]:
        """Where the answer came from, attached to every result."""
        meta = {"root": str(self._library.root)}
        if self.settings.config_path is not None:
            meta["config"] = str(self.settings.config_path)
        return meta
