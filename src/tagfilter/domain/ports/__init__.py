"""Domain ports (interfaces/protocols)."""

from tagfilter.domain.ports.filterer import FiltererProtocol
from tagfilter.domain.ports.projector import SubjectProjector

__all__ = [
    "FiltererProtocol",
    "SubjectProjector",
]
