"""Resource registry exposed to the gateway client, views and proxy."""

from .base import ResourceDefinition
from .registry import (
    UnknownResourceError,
    available_resources,
    get_resource,
    register_resource,
    resolve_resource,
)

__all__ = [
    "ResourceDefinition",
    "UnknownResourceError",
    "available_resources",
    "get_resource",
    "register_resource",
    "resolve_resource",
]
