"""Subject projector protocol.

A projector turns one tag into the text a filter compares against.
Users extend tagfilter by registering a projector per matcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tagfilter.domain.model.tags import Tag


class SubjectProjector(Protocol):
    """Callable: Tag -> subject text.

    Only called with tags of the matcher it is registered for.
    """

    def __call__(self, tag: Tag, /) -> str:
        """Project tag to subject."""
        ...
