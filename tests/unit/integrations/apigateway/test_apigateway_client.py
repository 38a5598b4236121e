"""Tests for the boto3-backed API Gateway provider."""

import boto3
import pytest
from botocore.stub import Stubber

from src.core.config import GatewayConfig
from src.core.errors import GatewayProviderError, GatewayResourceNotFoundError
from src.cors.method_definition import build_options_method
from src.cors.models import CorsConfig, PatchOp, PatchOperation
from src.integrations.apigateway.client import ApiGatewayProvider, create_apigateway_client

TARGET = {"restApiId": "api123", "resourceId": "res456", "httpMethod": "OPTIONS"}


@pytest.fixture
def apigateway_client():
    return boto3.client(
        "apigateway",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(apigateway_client):
    with Stubber(apigateway_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def provider(apigateway_client) -> ApiGatewayProvider:
    return ApiGatewayProvider(client=apigateway_client)


class TestDeleteMethod:
    @pytest.mark.asyncio
    async def test_success(self, provider, stubber) -> None:
        stubber.add_response("delete_method", {}, TARGET)

        await provider.delete_method("api123", "res456", "OPTIONS")

    @pytest.mark.asyncio
    async def test_not_found_is_translated(self, provider, stubber) -> None:
        """Test that NotFoundException becomes the domain not-found error."""
        stubber.add_client_error(
            "delete_method",
            service_error_code="NotFoundException",
            service_message="Invalid Method identifier specified",
            http_status_code=404,
            expected_params=TARGET,
        )

        with pytest.raises(GatewayResourceNotFoundError) as exc_info:
            await provider.delete_method("api123", "res456", "OPTIONS")

        assert exc_info.value.code == "NotFoundException"
        assert exc_info.value.operation == "delete_method"

    @pytest.mark.asyncio
    async def test_other_errors_become_provider_errors(self, provider, stubber) -> None:
        stubber.add_client_error(
            "delete_method",
            service_error_code="TooManyRequestsException",
            service_message="Too Many Requests",
            http_status_code=429,
            expected_params=TARGET,
        )

        with pytest.raises(GatewayProviderError) as exc_info:
            await provider.delete_method("api123", "res456", "OPTIONS")

        assert not isinstance(exc_info.value, GatewayResourceNotFoundError)
        assert exc_info.value.code == "TooManyRequestsException"
        assert exc_info.value.message == "Too Many Requests"


class TestCreateMethod:
    @pytest.mark.asyncio
    async def test_puts_method_responses_and_integration_in_order(self, provider, stubber) -> None:
        definition = build_options_method(CorsConfig(allowMethods=["GET"], allowOrigin="*"))
        origin = "method.response.header.Access-Control-Allow-Origin"
        methods = "method.response.header.Access-Control-Allow-Methods"

        stubber.add_response("put_method", {}, {**TARGET, "authorizationType": "NONE"})
        stubber.add_response(
            "put_method_response",
            {},
            {
                **TARGET,
                "statusCode": "200",
                "responseParameters": {methods: False, origin: False},
                "responseModels": {"application/json": "Empty"},
            },
        )
        stubber.add_response(
            "put_integration",
            {},
            {**TARGET, "type": "MOCK", "requestTemplates": {"application/json": '{"statusCode": 200}'}},
        )
        stubber.add_response(
            "put_integration_response",
            {},
            {
                **TARGET,
                "statusCode": "200",
                "responseParameters": {methods: "'GET'", origin: "'*'"},
                "responseTemplates": {"application/json": ""},
            },
        )

        await provider.create_method("api123", "res456", definition)

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self, provider, stubber) -> None:
        definition = build_options_method(CorsConfig(allowMethods=["GET"], allowOrigin="*"))
        stubber.add_client_error(
            "put_method",
            service_error_code="ConflictException",
            service_message="Method already exists for this resource",
            http_status_code=409,
        )

        with pytest.raises(GatewayProviderError) as exc_info:
            await provider.create_method("api123", "res456", definition)

        assert exc_info.value.operation == "put_method"


class TestGetMethod:
    @pytest.mark.asyncio
    async def test_returns_descriptor(self, provider, stubber) -> None:
        response = {
            "httpMethod": "OPTIONS",
            "methodIntegration": {
                "type": "MOCK",
                "integrationResponses": {
                    "200": {
                        "statusCode": "200",
                        "responseParameters": {"method.response.header.Access-Control-Allow-Origin": "'*'"},
                    }
                },
            },
        }
        stubber.add_response("get_method", response, TARGET)

        descriptor = await provider.get_method("api123", "res456", "OPTIONS")

        assert descriptor["methodIntegration"]["type"] == "MOCK"
        assert "ResponseMetadata" not in descriptor


class TestUpdateResponses:
    @pytest.mark.asyncio
    async def test_update_method_response(self, provider, stubber) -> None:
        path = "/responseParameters/method.response.header.Access-Control-Max-Age"
        stubber.add_response(
            "update_method_response",
            {},
            {**TARGET, "statusCode": "200", "patchOperations": [{"op": "remove", "path": path}]},
        )

        await provider.update_method_response(
            "api123", "res456", "OPTIONS", "200", [PatchOperation(op=PatchOp.REMOVE, path=path)]
        )

    @pytest.mark.asyncio
    async def test_update_integration_response_not_found(self, provider, stubber) -> None:
        path = "/responseParameters/method.response.header.Access-Control-Max-Age"
        stubber.add_client_error(
            "update_integration_response",
            service_error_code="NotFoundException",
            service_message="Invalid Response status code specified",
            http_status_code=404,
            expected_params={
                **TARGET,
                "statusCode": "200",
                "patchOperations": [{"op": "add", "path": path, "value": "'10'"}],
            },
        )

        with pytest.raises(GatewayResourceNotFoundError):
            await provider.update_integration_response(
                "api123", "res456", "OPTIONS", "200", [PatchOperation(op=PatchOp.ADD, path=path, value="'10'")]
            )


class TestCreateApigatewayClient:
    def test_uses_configured_region_and_endpoint(self) -> None:
        gateway_config = GatewayConfig(
            region="eu-west-1",
            access_key_id="testing",
            secret_access_key="testing",
            endpoint_url="http://localhost:4566",
        )

        client = create_apigateway_client(gateway_config)

        assert client.meta.region_name == "eu-west-1"
        assert client.meta.endpoint_url == "http://localhost:4566"
