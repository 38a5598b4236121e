"""
CORS header naming and rendering.

Maps CorsConfig fields onto the gateway's response parameters and renders
field values into the static header strings the gateway returns.
"""

from typing import Any

OPTIONS_METHOD = "OPTIONS"
RESPONSE_HEADER_PREFIX = "method.response.header."

HEADER_NAMES: dict[str, str] = {
    "allow_methods": "Access-Control-Allow-Methods",
    "allow_origin": "Access-Control-Allow-Origin",
    "allow_headers": "Access-Control-Allow-Headers",
    "expose_headers": "Access-Control-Expose-Headers",
    "max_age": "Access-Control-Max-Age",
    "allow_credentials": "Access-Control-Allow-Credentials",
}


def response_parameter(field: str) -> str:
    """Response parameter key for a CorsConfig field, e.g. method.response.header.Access-Control-Max-Age."""
    return f"{RESPONSE_HEADER_PREFIX}{HEADER_NAMES[field]}"


def patch_path(field: str) -> str:
    """Patch operation path targeting the header of a CorsConfig field."""
    return f"/responseParameters/{response_parameter(field)}"


def field_for_parameter(parameter: str) -> str | None:
    """Reverse of response_parameter; None for headers unrelated to CORS."""
    for field in HEADER_NAMES:
        if response_parameter(field) == parameter:
            return field
    return None


def render_value(value: Any) -> str:
    """Render a field value as a header value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(str(item) for item in value)
    return str(value)


def quote(value: str) -> str:
    """Static integration response values are single-quoted literals."""
    return f"'{value}'"


def unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith("'") and value.endswith("'"):
        return value[1:-1]
    return value


def render_header(value: Any) -> str:
    """Rendered and quoted header value, ready for an integration response."""
    return quote(render_value(value))
