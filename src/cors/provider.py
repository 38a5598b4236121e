"""
Gateway resource provider interface.

This module defines the abstract base class that gateway adapters must
implement. Adapters translate their SDK's not-found errors into
GatewayResourceNotFoundError and everything else into GatewayProviderError,
so callers never inspect provider-specific error shapes.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.cors.method_definition import MethodDefinition
from src.cors.models import PatchOperation


class GatewayResourceProvider(ABC):
    """Async capability interface over a remote API gateway."""

    @abstractmethod
    async def delete_method(self, rest_api_id: str, resource_id: str, http_method: str) -> None:
        """Delete a method from a resource.

        Raises:
            GatewayResourceNotFoundError: If the method does not exist.
            GatewayProviderError: For any other failure.
        """
        pass

    @abstractmethod
    async def create_method(self, rest_api_id: str, resource_id: str, method_definition: MethodDefinition) -> None:
        """Create a method with its integration, method response and integration response."""
        pass

    @abstractmethod
    async def get_method(self, rest_api_id: str, resource_id: str, http_method: str) -> dict[str, Any]:
        """Fetch the method descriptor.

        Raises:
            GatewayResourceNotFoundError: If the method does not exist.
        """
        pass

    @abstractmethod
    async def update_method_response(
        self,
        rest_api_id: str,
        resource_id: str,
        http_method: str,
        status_code: str,
        operations: list[PatchOperation],
    ) -> None:
        """Apply patch operations to a method response."""
        pass

    @abstractmethod
    async def update_integration_response(
        self,
        rest_api_id: str,
        resource_id: str,
        http_method: str,
        status_code: str,
        operations: list[PatchOperation],
    ) -> None:
        """Apply patch operations to an integration response."""
        pass
