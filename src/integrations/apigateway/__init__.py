"""
AWS API Gateway adapter.

This package provides the boto3-backed gateway resource provider.
"""

from src.integrations.apigateway.client import ApiGatewayProvider, create_apigateway_client

__all__ = [
    "ApiGatewayProvider",
    "create_apigateway_client",
]
