"""Parameter templating exports."""

from .attribute_references import (
    AttributeLookup,
    AttributeSource,
    LookupStatus,
    is_attribute_reference,
    referenced_field,
    resolve_attribute_reference,
)
from .param_builder import build_params

__all__ = [
    "AttributeLookup",
    "AttributeSource",
    "LookupStatus",
    "build_params",
    "is_attribute_reference",
    "referenced_field",
    "resolve_attribute_reference",
]
