"""
CORS reconciliation for API gateway resources.

This package classifies changes between CORS configurations, generates the
header patch operations, and drives a gateway provider to apply them.
"""

from src.cors.classifier import classify
from src.cors.method_definition import MethodDefinition, build_options_method, parse_cors_config
from src.cors.models import ChangeAction, CorsConfig, PatchOp, PatchOperation, ReconciliationInput
from src.cors.operations import generate_operations
from src.cors.provider import GatewayResourceProvider
from src.cors.service import CorsService

__all__ = [
    # Models
    "ChangeAction",
    "CorsConfig",
    "PatchOp",
    "PatchOperation",
    "ReconciliationInput",
    "MethodDefinition",
    # Logic
    "classify",
    "generate_operations",
    "build_options_method",
    "parse_cors_config",
    # Service
    "CorsService",
    "GatewayResourceProvider",
]
