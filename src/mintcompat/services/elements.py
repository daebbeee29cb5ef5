"""ElementsService — report the custom-element allow-list."""

from __future__ import annotations

from mintcompat.domain.elements import CUSTOM_ELEMENTS
from mintcompat.services.base import BaseService
from mintcompat.services.result import ServiceResult


class ElementsService(BaseService):
    def list_elements(self) -> ServiceResult:
        """Return every tag the host compiler should treat as custom."""
        elements = self.custom_elements()
        return ServiceResult(
            ok=True,
            op="elements",
            data={
                "elements": elements,
                "count": len(elements),
                "extra": [name for name in elements if name not in CUSTOM_ELEMENTS],
            },
        )
