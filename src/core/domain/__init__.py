"""
Domain models and value objects.

Contains scalar references (IntCell, FrozenIntCell, AttributeRef, ItemRef)
and the validated view parameters (ViewSpec).
"""

from src.core.domain.scalar import (
    AttributeRef,
    FrozenIntCell,
    IntCell,
    ItemRef,
    ReadOnlyRef,
    as_scalar_ref,
    is_readonly,
)
from src.core.domain.view_spec import ViewSpec

__all__ = [
    # Scalar references
    "IntCell",
    "FrozenIntCell",
    "AttributeRef",
    "ItemRef",
    "ReadOnlyRef",
    "as_scalar_ref",
    "is_readonly",
    # View parameters
    "ViewSpec",
]
