from typing import Any, Dict, Mapping, Optional

from starlette.datastructures import QueryParams


def first_query_value(query: Mapping[str, str], key: str) -> str:
    """Return the first value given for `key`, or an empty string."""
    if isinstance(query, QueryParams):
        values = query.getlist(key)
        return values[0] if values else ""
    return query.get(key) or ""


def default_query(query: Mapping[str, str], key: str, default: str) -> str:
    """
    Look up a query parameter, falling back to `default`.

    Absent and empty values both yield the default. Values are returned
    as strings, never converted.
    """
    return first_query_value(query, key) or default


def query_parameter(name: str, description: str, default: Optional[str] = None,
                    required: bool = False) -> Dict[str, Any]:
    """OpenAPI entry for a query parameter read through `default_query`."""
    schema: Dict[str, Any] = {"type": "string"}
    if default is not None:
        schema["default"] = default
    return {
        "name": name,
        "in": "query",
        "required": required,
        "description": description,
        "schema": schema,
    }
