"""Backend services."""

from services.component_data import (
    ComponentDataError,
    prepare_component_data,
)

__all__ = [
    "ComponentDataError",
    "prepare_component_data",
]
