"""
OPTIONS method definitions.

Renders a CorsConfig into the full OPTIONS method the gateway needs to answer
preflight requests (a mock integration echoing static CORS headers), and reads
a CorsConfig back out of an existing method descriptor.
"""

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from src.cors.headers import (
    HEADER_NAMES,
    OPTIONS_METHOD,
    field_for_parameter,
    render_header,
    response_parameter,
    unquote,
)
from src.cors.models import CorsConfig

logger = structlog.get_logger(__name__)

DEFAULT_STATUS_CODE = "200"
JSON_CONTENT_TYPE = "application/json"


class MethodDefinition(BaseModel):
    """Everything needed to create the OPTIONS method on a resource."""

    model_config = ConfigDict(frozen=True)

    http_method: str = OPTIONS_METHOD
    authorization_type: str = "NONE"
    status_code: str = DEFAULT_STATUS_CODE
    integration_type: str = "MOCK"
    request_templates: dict[str, str] = Field(default_factory=dict)
    response_models: dict[str, str] = Field(default_factory=lambda: {JSON_CONTENT_TYPE: "Empty"})
    response_templates: dict[str, str] = Field(default_factory=lambda: {JSON_CONTENT_TYPE: ""})
    # Integration response header values, already quoted
    response_parameters: dict[str, str] = Field(default_factory=dict)

    @property
    def method_response_parameters(self) -> dict[str, bool]:
        """Header declarations for the method response; False marks them optional."""
        return {parameter: False for parameter in self.response_parameters}


def build_options_method(cors_config: CorsConfig, status_code: str = DEFAULT_STATUS_CODE) -> MethodDefinition:
    """Render the full OPTIONS method for a CORS configuration."""
    response_parameters: dict[str, str] = {}
    for field in HEADER_NAMES:
        value = getattr(cors_config, field)
        if value is not None:
            response_parameters[response_parameter(field)] = render_header(value)

    return MethodDefinition(
        status_code=status_code,
        request_templates={JSON_CONTENT_TYPE: f'{{"statusCode": {int(status_code)}}}'},
        response_parameters=response_parameters,
    )


def parse_cors_config(descriptor: dict[str, Any], status_code: str = DEFAULT_STATUS_CODE) -> CorsConfig | None:
    """
    Read the CORS configuration out of a gateway method descriptor.

    Returns None when the method carries no CORS origin/methods headers, which
    is the same as CORS being disabled for the resource.
    Raises InvalidCorsConfigError when the headers are present but malformed.
    """
    integration_responses = descriptor.get("methodIntegration", {}).get("integrationResponses", {})
    parameters = integration_responses.get(status_code, {}).get("responseParameters", {})

    values: dict[str, str] = {}
    for parameter, raw_value in parameters.items():
        field = field_for_parameter(parameter)
        if field is not None:
            values[field] = unquote(raw_value)

    if "allow_origin" not in values or "allow_methods" not in values:
        logger.debug("options_method_without_cors_headers", parameters=sorted(parameters))
        return None

    return CorsConfig.from_dict(values)
