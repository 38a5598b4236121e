# API endpoints package

from src.api.cors import CorsUpdateRequest, CorsUpdateResponse, router

__all__ = [
    "CorsUpdateRequest",
    "CorsUpdateResponse",
    "router",
]
