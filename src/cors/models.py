from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.errors import InvalidCorsConfigError

# Fields that only change header values on the OPTIONS method, in patch order.
SECONDARY_FIELDS: tuple[str, ...] = ("allow_headers", "expose_headers", "max_age", "allow_credentials")


class ChangeAction(str, Enum):
    """What has to happen to the OPTIONS method to reach the desired CORS state."""

    NONE = "none"
    CREATE = "create"
    DELETE = "delete"
    REBUILD = "rebuild"
    PATCH = "patch"


class PatchOp(str, Enum):
    """Patch operation verbs understood by the gateway."""

    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"


def _split_tokens(value: Any) -> Any:
    """Accept comma-separated strings as well as sequences of tokens."""
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, list | tuple):
        return tuple(str(token).strip() for token in value if str(token).strip())
    return value


class CorsConfig(BaseModel):
    """
    CORS configuration for a single gateway resource.

    A missing CorsConfig means CORS is disabled for the resource, so a present
    one always carries at least the allowed methods and origin. Both the
    snake_case field names and the camelCase wire names are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    allow_methods: tuple[str, ...] = Field(alias="allowMethods", min_length=1)
    allow_origin: str = Field(alias="allowOrigin", min_length=1)
    allow_headers: tuple[str, ...] | None = Field(default=None, alias="allowHeaders")
    expose_headers: tuple[str, ...] | None = Field(default=None, alias="exposeHeaders")
    max_age: int | None = Field(default=None, alias="maxAge", ge=0)
    allow_credentials: bool | None = Field(default=None, alias="allowCredentials")

    @field_validator("allow_methods", mode="before")
    @classmethod
    def normalize_methods(cls, value: Any) -> Any:
        tokens = _split_tokens(value)
        if isinstance(tokens, tuple):
            return tuple(token.upper() for token in tokens)
        return tokens

    @field_validator("allow_headers", "expose_headers", mode="before")
    @classmethod
    def normalize_headers(cls, value: Any) -> Any:
        tokens = _split_tokens(value)
        # An empty header list renders the same as no header at all
        if tokens == ():
            return None
        return tokens

    @field_validator("allow_origin", mode="before")
    @classmethod
    def strip_origin(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CorsConfig":
        """Build a CorsConfig from a raw mapping, raising InvalidCorsConfigError on bad input."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
            raise InvalidCorsConfigError(
                f"Invalid CORS configuration: {', '.join(fields)}",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Camel-cased representation without unset optional fields."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        for key in ("allowMethods", "allowHeaders", "exposeHeaders"):
            if key in data:
                data[key] = list(data[key])
        return data


class PatchOperation(BaseModel):
    """A single add/replace/remove instruction against a response object."""

    model_config = ConfigDict(frozen=True)

    op: PatchOp
    path: str
    value: str | None = None

    def to_provider(self) -> dict[str, str]:
        """Shape expected by the gateway's patchOperations parameter."""
        operation = {"op": self.op.value, "path": self.path}
        if self.value is not None:
            operation["value"] = self.value
        return operation


class ReconciliationInput(BaseModel):
    """Old and new CORS state for one gateway resource."""

    model_config = ConfigDict(frozen=True)

    rest_api_id: str = Field(min_length=1)
    resource_id: str = Field(min_length=1)
    old: CorsConfig | None = None
    new: CorsConfig | None = None

    @property
    def subject_ids(self) -> dict[str, str]:
        return {"rest_api_id": self.rest_api_id, "resource_id": self.resource_id}
