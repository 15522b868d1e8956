"""Rendering and parsing of resources, plus semantic comparison."""

import json
import logging
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ValidationError

from .errors import SerializationError
from .models import Service

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["yaml", "json"]


def format_resource_yaml(resource: Dict[str, Any]) -> str:
    """Format resource as YAML with sorted keys."""
    return yaml.safe_dump(
        resource, default_flow_style=False, allow_unicode=True, sort_keys=True
    )


def format_resource_json(resource: Dict[str, Any]) -> str:
    """Format resource as JSON."""
    return json.dumps(resource, indent=2, ensure_ascii=False, sort_keys=True) + "\n"


def render_service(service: Service, output_format: str = "yaml") -> str:
    """Render a service; unset fields are omitted."""
    if not isinstance(service, Service):
        raise SerializationError(
            f"Cannot render {type(service).__name__} as a service"
        )
    data = service.model_dump(mode="json", exclude_none=True)
    logger.debug(f"Rendering service {service.metadata.name} as {output_format}")
    try:
        if output_format == "yaml":
            return format_resource_yaml(data)
        if output_format == "json":
            return format_resource_json(data)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise SerializationError(f"Failed to render service: {e}")
    raise SerializationError(
        f"Unknown output format: {output_format}. "
        f"Valid formats: {', '.join(OUTPUT_FORMATS)}"
    )


def parse_service(text: str) -> Service:
    """Parse rendered YAML or JSON text back into a service."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}")
    if not isinstance(data, dict):
        raise SerializationError("Expected a mapping at the top level")
    try:
        return Service.model_validate(data)
    except ValidationError as e:
        raise SerializationError(f"Invalid service: {e}")


def normalize(value: Any) -> Any:
    """Reduce a value to a canonical form for comparison.

    None, empty lists and empty mappings all normalize to None, mapping
    keys holding None are dropped, booleans are tagged so they never equal
    numbers, and integral floats become ints.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if isinstance(value, dict):
        items = {k: normalize(v) for k, v in value.items()}
        items = {k: v for k, v in items.items() if v is not None}
        return items or None
    if isinstance(value, (list, tuple)):
        return [normalize(v) for v in value] or None
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def semantically_equal(a: Any, b: Any) -> bool:
    """Field-by-field equality that ignores representation differences."""
    equal = normalize(a) == normalize(b)
    if not equal:
        logger.debug(f"Objects differ: {normalize(a)!r} != {normalize(b)!r}")
    return equal
