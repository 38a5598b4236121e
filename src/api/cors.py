"""CORS configuration endpoints for gateway resources."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.api.dependencies import get_cors_service
from src.api.errors import create_error_response
from src.core.errors import GatewayProviderError, GatewayResourceNotFoundError, InvalidCorsConfigError
from src.core.utils.logging import log_operation
from src.cors.models import ChangeAction
from src.cors.service import CorsService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/restapis/{rest_api_id}/resources/{resource_id}/cors", tags=["CORS"])


class CorsUpdateRequest(BaseModel):
    """Previously applied and desired CORS configuration; null means CORS disabled."""

    # Raw mappings so validation failures come back in the standard error shape
    old: dict[str, Any] | None = None
    new: dict[str, Any] | None = None


class CorsUpdateResponse(BaseModel):
    rest_api_id: str
    resource_id: str
    action: ChangeAction


def _http_error(e: Exception) -> HTTPException:
    """Map reconciler errors onto HTTP responses."""
    if isinstance(e, InvalidCorsConfigError):
        body = create_error_response("invalid_cors_config", str(e), details={"errors": e.errors})
        return HTTPException(status_code=422, detail=body.model_dump())
    if isinstance(e, GatewayResourceNotFoundError):
        body = create_error_response("gateway_resource_not_found", e.message, details={"operation": e.operation})
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=body.model_dump())
    if isinstance(e, GatewayProviderError):
        body = create_error_response(
            "gateway_provider_error", e.message, details={"operation": e.operation, "provider_code": e.code}
        )
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=body.model_dump())
    body = create_error_response("internal_error", str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=body.model_dump())


@router.put(
    "",
    response_model=CorsUpdateResponse,
    summary="Reconcile CORS configuration",
    description="Converge the resource's OPTIONS method from the old CORS configuration to the new one.",
)
async def update_cors_configuration(
    rest_api_id: str,
    resource_id: str,
    request: CorsUpdateRequest,
    service: CorsService = Depends(get_cors_service),
) -> CorsUpdateResponse:
    subject_ids = {"rest_api_id": rest_api_id, "resource_id": resource_id}
    try:
        async with log_operation("cors_update", subject_ids=subject_ids):
            action = await service.update_cors_configuration(rest_api_id, resource_id, request.old, request.new)
    except (InvalidCorsConfigError, GatewayProviderError) as e:
        raise _http_error(e) from e

    return CorsUpdateResponse(rest_api_id=rest_api_id, resource_id=resource_id, action=action)


@router.post(
    "/options",
    status_code=status.HTTP_201_CREATED,
    summary="Create OPTIONS method",
    description="Delete any existing OPTIONS method and create it from the given CORS configuration.",
)
async def put_options_method(
    rest_api_id: str,
    resource_id: str,
    cors_config: dict[str, Any],
    service: CorsService = Depends(get_cors_service),
) -> dict[str, str]:
    subject_ids = {"rest_api_id": rest_api_id, "resource_id": resource_id}
    try:
        async with log_operation("cors_put_options_method", subject_ids=subject_ids):
            await service.put_options_method(rest_api_id, resource_id, cors_config)
    except (InvalidCorsConfigError, GatewayProviderError) as e:
        raise _http_error(e) from e

    return {"status": "created", **subject_ids}


@router.get(
    "",
    response_model=dict[str, Any],
    summary="Read CORS configuration",
    description="Read the CORS configuration currently applied to the resource's OPTIONS method.",
)
async def get_cors_configuration(
    rest_api_id: str,
    resource_id: str,
    service: CorsService = Depends(get_cors_service),
) -> dict[str, Any]:
    try:
        cors_config = await service.get_cors_configuration(rest_api_id, resource_id)
    except (InvalidCorsConfigError, GatewayProviderError) as e:
        raise _http_error(e) from e

    if cors_config is None:
        logger.info("cors_not_configured", rest_api_id=rest_api_id, resource_id=resource_id)
        body = create_error_response("cors_not_configured", f"Resource {resource_id} has no CORS configuration")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=body.model_dump())

    return cors_config.to_dict()
