from functools import lru_cache

import structlog
from fastapi import Depends

from src.core.config import config
from src.cors.provider import GatewayResourceProvider
from src.cors.service import CorsService
from src.integrations.apigateway import ApiGatewayProvider

logger = structlog.get_logger(__name__)

# --- Service Dependencies ---  # DI: override get_gateway_provider in tests.


@lru_cache
def get_gateway_provider() -> GatewayResourceProvider:
    """
    One boto3-backed provider per process; boto3 clients are thread-safe.
    """
    logger.info("creating_gateway_provider", region=config.gateway.region)
    return ApiGatewayProvider(gateway_config=config.gateway)


def get_cors_service(provider: GatewayResourceProvider = Depends(get_gateway_provider)) -> CorsService:
    return CorsService(provider, status_code=config.gateway.options_status_code)
