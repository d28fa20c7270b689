"""Infrastructure layer: subject projections for tag kinds."""

from tagfilter.infrastructure.projections import (
    ProjectionTable,
    default_projections,
    project_file_event_kind,
    project_process,
    project_source,
)

__all__ = [
    "ProjectionTable",
    "default_projections",
    "project_file_event_kind",
    "project_process",
    "project_source",
]
