"""Tests for the CORS configuration and patch operation models."""

import pytest
from pydantic import ValidationError

from src.core.errors import InvalidCorsConfigError
from src.cors.models import CorsConfig, PatchOp, PatchOperation, ReconciliationInput


class TestCorsConfig:
    def test_accepts_camel_case_wire_names(self) -> None:
        """Test that the camelCase names used by callers populate the model."""
        config = CorsConfig(allowMethods=["GET"], allowOrigin="*", maxAge=10, allowCredentials=False)

        assert config.allow_methods == ("GET",)
        assert config.allow_origin == "*"
        assert config.max_age == 10
        assert config.allow_credentials is False

    def test_accepts_snake_case_names(self) -> None:
        config = CorsConfig(allow_methods=["GET"], allow_origin="https://example.com")
        assert config.allow_origin == "https://example.com"

    def test_methods_are_upper_cased(self) -> None:
        config = CorsConfig(allowMethods=["get", " put "], allowOrigin="*")
        assert config.allow_methods == ("GET", "PUT")

    def test_comma_separated_strings_are_split(self) -> None:
        """Test that header lists given as one string become token sequences."""
        config = CorsConfig(allowMethods="GET,POST", allowOrigin="*", allowHeaders="x-a, x-b")

        assert config.allow_methods == ("GET", "POST")
        assert config.allow_headers == ("x-a", "x-b")

    def test_empty_header_list_is_absent(self) -> None:
        config = CorsConfig(allowMethods=["GET"], allowOrigin="*", allowHeaders=[], exposeHeaders="")
        assert config.allow_headers is None
        assert config.expose_headers is None

    def test_is_immutable(self, cors_config: CorsConfig) -> None:
        with pytest.raises(ValidationError):
            cors_config.allow_origin = "https://other.example.com"  # type: ignore[misc]

    def test_negative_max_age_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CorsConfig(allowMethods=["GET"], allowOrigin="*", maxAge=-1)

    def test_to_dict_omits_unset_fields(self, minimal_cors_config: CorsConfig) -> None:
        assert minimal_cors_config.to_dict() == {"allowMethods": ["GET", "PUT"], "allowOrigin": "*"}

    def test_to_dict_full(self, cors_config: CorsConfig) -> None:
        assert cors_config.to_dict() == {
            "allowMethods": ["GET", "PUT"],
            "allowOrigin": "*",
            "allowHeaders": ["x-header"],
            "exposeHeaders": ["x-expose"],
            "maxAge": 123,
            "allowCredentials": True,
        }


class TestCorsConfigFromDict:
    def test_valid_mapping(self) -> None:
        config = CorsConfig.from_dict({"allowMethods": ["GET", "PUT"], "allowOrigin": "*"})
        assert config.allow_methods == ("GET", "PUT")

    def test_missing_allow_origin(self) -> None:
        """Test that a missing origin raises the domain error, not a pydantic one."""
        with pytest.raises(InvalidCorsConfigError) as exc_info:
            CorsConfig.from_dict({"allowMethods": ["GET"]})

        assert "allowOrigin" in str(exc_info.value)
        assert exc_info.value.errors

    def test_missing_allow_methods(self) -> None:
        with pytest.raises(InvalidCorsConfigError) as exc_info:
            CorsConfig.from_dict({"allowOrigin": "*"})
        assert "allowMethods" in str(exc_info.value)

    def test_empty_allow_methods(self) -> None:
        with pytest.raises(InvalidCorsConfigError):
            CorsConfig.from_dict({"allowMethods": [], "allowOrigin": "*"})

    def test_blank_allow_origin(self) -> None:
        with pytest.raises(InvalidCorsConfigError):
            CorsConfig.from_dict({"allowMethods": ["GET"], "allowOrigin": "  "})


class TestPatchOperation:
    def test_to_provider_with_value(self) -> None:
        operation = PatchOperation(op=PatchOp.ADD, path="/responseParameters/x", value="'1'")
        assert operation.to_provider() == {"op": "add", "path": "/responseParameters/x", "value": "'1'"}

    def test_to_provider_without_value(self) -> None:
        operation = PatchOperation(op=PatchOp.REMOVE, path="/responseParameters/x")
        assert operation.to_provider() == {"op": "remove", "path": "/responseParameters/x"}


class TestReconciliationInput:
    def test_defaults_to_cors_disabled(self) -> None:
        reconciliation = ReconciliationInput(rest_api_id="api", resource_id="res")

        assert reconciliation.old is None
        assert reconciliation.new is None
        assert reconciliation.subject_ids == {"rest_api_id": "api", "resource_id": "res"}

    def test_requires_identifiers(self) -> None:
        with pytest.raises(ValidationError):
            ReconciliationInput(rest_api_id="", resource_id="res")
