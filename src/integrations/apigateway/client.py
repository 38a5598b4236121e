"""
AWS API Gateway adapter.

Implements GatewayResourceProvider on top of the boto3 ``apigateway`` client.
boto3 is blocking, so each SDK call runs in a worker thread.
"""

import asyncio
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from src.core.config import GatewayConfig, config
from src.core.errors import GatewayProviderError, GatewayResourceNotFoundError
from src.cors.method_definition import MethodDefinition
from src.cors.models import PatchOperation
from src.cors.provider import GatewayResourceProvider

logger = structlog.get_logger(__name__)

NOT_FOUND_CODE = "NotFoundException"


def create_apigateway_client(gateway_config: GatewayConfig) -> Any:
    """
    Build a boto3 API Gateway client.

    Uses explicit credentials when both halves of the key pair are configured,
    otherwise the profile or the default boto3 credential chain.
    """
    session = boto3.session.Session(profile_name=gateway_config.profile, region_name=gateway_config.region)

    client_kwargs: dict[str, Any] = {}
    if gateway_config.endpoint_url:
        client_kwargs["endpoint_url"] = gateway_config.endpoint_url
    if gateway_config.has_explicit_credentials:
        client_kwargs.update(
            {
                "aws_access_key_id": gateway_config.access_key_id,
                "aws_secret_access_key": gateway_config.secret_access_key,
            }
        )

    return session.client("apigateway", **client_kwargs)


class ApiGatewayProvider(GatewayResourceProvider):
    """
    Gateway resource provider backed by AWS API Gateway (REST APIs).

    This is the only place that knows about botocore error shapes: a
    ``NotFoundException`` error code becomes GatewayResourceNotFoundError and
    every other SDK failure becomes GatewayProviderError.
    """

    def __init__(self, client: Any | None = None, gateway_config: GatewayConfig | None = None):
        self._client = client or create_apigateway_client(gateway_config or config.gateway)

    async def _call(self, operation: str, **params: Any) -> dict[str, Any]:
        sdk_method = getattr(self._client, operation)
        try:
            response = await asyncio.to_thread(sdk_method, **params)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code")
            message = error.get("Message") or str(e)
            if code == NOT_FOUND_CODE:
                raise GatewayResourceNotFoundError(message, code=code, operation=operation) from e
            logger.error("apigateway_call_failed", operation=operation, code=code, error=message)
            raise GatewayProviderError(message, code=code, operation=operation) from e
        except BotoCoreError as e:
            logger.error("apigateway_call_failed", operation=operation, error=str(e))
            raise GatewayProviderError(str(e), code=type(e).__name__, operation=operation) from e

        logger.debug("apigateway_call_succeeded", operation=operation)
        return response

    async def delete_method(self, rest_api_id: str, resource_id: str, http_method: str) -> None:
        await self._call("delete_method", restApiId=rest_api_id, resourceId=resource_id, httpMethod=http_method)

    async def create_method(self, rest_api_id: str, resource_id: str, method_definition: MethodDefinition) -> None:
        """
        Create the method and its mock integration.

        The gateway has no single call for this, so the method, method response,
        integration and integration response are put in that order. The
        integration response can only reference headers the method response declares.
        """
        target = {
            "restApiId": rest_api_id,
            "resourceId": resource_id,
            "httpMethod": method_definition.http_method,
        }

        await self._call("put_method", **target, authorizationType=method_definition.authorization_type)
        await self._call(
            "put_method_response",
            **target,
            statusCode=method_definition.status_code,
            responseParameters=method_definition.method_response_parameters,
            responseModels=method_definition.response_models,
        )
        await self._call(
            "put_integration",
            **target,
            type=method_definition.integration_type,
            requestTemplates=method_definition.request_templates,
        )
        await self._call(
            "put_integration_response",
            **target,
            statusCode=method_definition.status_code,
            responseParameters=method_definition.response_parameters,
            responseTemplates=method_definition.response_templates,
        )

    async def get_method(self, rest_api_id: str, resource_id: str, http_method: str) -> dict[str, Any]:
        response = await self._call("get_method", restApiId=rest_api_id, resourceId=resource_id, httpMethod=http_method)
        response.pop("ResponseMetadata", None)
        return response

    async def update_method_response(
        self,
        rest_api_id: str,
        resource_id: str,
        http_method: str,
        status_code: str,
        operations: list[PatchOperation],
    ) -> None:
        await self._call(
            "update_method_response",
            restApiId=rest_api_id,
            resourceId=resource_id,
            httpMethod=http_method,
            statusCode=status_code,
            patchOperations=[operation.to_provider() for operation in operations],
        )

    async def update_integration_response(
        self,
        rest_api_id: str,
        resource_id: str,
        http_method: str,
        status_code: str,
        operations: list[PatchOperation],
    ) -> None:
        await self._call(
            "update_integration_response",
            restApiId=rest_api_id,
            resourceId=resource_id,
            httpMethod=http_method,
            statusCode=status_code,
            patchOperations=[operation.to_provider() for operation in operations],
        )
