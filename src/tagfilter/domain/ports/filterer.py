"""Filterer protocol.

Host pipelines depend on this Protocol, not on a concrete filterer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tagfilter.domain.model.event import Event


class FiltererProtocol(Protocol):
    """Contract for event filterers."""

    def check_event(self, event: Event) -> bool:
        """Decide whether event proceeds.

        Args:
            event: Event to check.

        Returns:
            True if event passes, False if rejected.

        Raises:
            TagFilterError: If a rule could not be evaluated.
        """
        ...
