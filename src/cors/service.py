"""
CORS reconciliation service.

Sequences gateway provider calls so the OPTIONS method of a resource matches
the declared CORS configuration. Every step is awaited before the next one
starts; the first failure aborts the pipeline and propagates unchanged.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from src.core.errors import GatewayResourceNotFoundError, InvalidCorsConfigError
from src.cors.classifier import classify
from src.cors.headers import OPTIONS_METHOD
from src.cors.method_definition import DEFAULT_STATUS_CODE, build_options_method, parse_cors_config
from src.cors.models import ChangeAction, CorsConfig, ReconciliationInput
from src.cors.operations import generate_operations, method_response_operations
from src.cors.provider import GatewayResourceProvider

logger = structlog.get_logger(__name__)


def coerce_cors_config(value: CorsConfig | Mapping[str, Any] | None) -> CorsConfig | None:
    """Accept a CorsConfig, a raw mapping or None; mappings are validated."""
    if value is None or isinstance(value, CorsConfig):
        return value
    if isinstance(value, Mapping):
        return CorsConfig.from_dict(value)
    raise InvalidCorsConfigError(f"Unsupported CORS configuration type: {type(value).__name__}")


class CorsService:
    """
    Keeps the OPTIONS method of gateway resources in sync with CORS configuration.

    The service holds no state besides its provider, so one instance can
    reconcile different resources concurrently. There is no retry, rollback or
    timeout here: a REBUILD whose create fails leaves the method deleted and the
    caller is expected to re-run the reconciliation.
    """

    def __init__(self, provider: GatewayResourceProvider, status_code: str = DEFAULT_STATUS_CODE):
        self.provider = provider
        self.status_code = status_code

    async def reconcile(self, reconciliation: ReconciliationInput) -> ChangeAction:
        """
        Converge the OPTIONS method from `reconciliation.old` to `reconciliation.new`.

        Returns:
            The action that was applied.

        Raises:
            GatewayProviderError: The first provider failure that is not a tolerated not-found.
        """
        action = classify(reconciliation.old, reconciliation.new)
        logger.info("cors_change_classified", **reconciliation.subject_ids, action=action.value)

        rest_api_id = reconciliation.rest_api_id
        resource_id = reconciliation.resource_id

        if action in (ChangeAction.CREATE, ChangeAction.REBUILD):
            await self._replace_options_method(rest_api_id, resource_id, reconciliation.new)
        elif action is ChangeAction.DELETE:
            await self._delete_options_method(rest_api_id, resource_id)
        elif action is ChangeAction.PATCH:
            await self._patch_options_method(rest_api_id, resource_id, reconciliation.old, reconciliation.new)

        return action

    async def put_options_method(
        self, rest_api_id: str, resource_id: str, cors_config: CorsConfig | Mapping[str, Any]
    ) -> None:
        """Unconditionally delete (if present) and recreate the OPTIONS method."""
        config = coerce_cors_config(cors_config)
        if config is None:
            raise InvalidCorsConfigError("A CORS configuration is required to create the OPTIONS method")
        await self._replace_options_method(rest_api_id, resource_id, config)

    async def update_cors_configuration(
        self,
        rest_api_id: str,
        resource_id: str,
        old_cors_config: CorsConfig | Mapping[str, Any] | None,
        new_cors_config: CorsConfig | Mapping[str, Any] | None,
    ) -> ChangeAction:
        """Validate both configurations, then reconcile the resource."""
        # The new config must be valid before anything touches the gateway
        new = coerce_cors_config(new_cors_config)
        old = coerce_cors_config(old_cors_config)
        reconciliation = ReconciliationInput(rest_api_id=rest_api_id, resource_id=resource_id, old=old, new=new)
        return await self.reconcile(reconciliation)

    async def get_cors_configuration(self, rest_api_id: str, resource_id: str) -> CorsConfig | None:
        """Read the CORS configuration currently applied to a resource, or None if it has none."""
        try:
            descriptor = await self.provider.get_method(rest_api_id, resource_id, OPTIONS_METHOD)
        except GatewayResourceNotFoundError:
            return None
        return parse_cors_config(descriptor, self.status_code)

    async def _replace_options_method(self, rest_api_id: str, resource_id: str, cors_config: CorsConfig) -> None:
        # Delete must finish before create so two definitions never coexist
        await self._delete_options_method(rest_api_id, resource_id)
        method_definition = build_options_method(cors_config, self.status_code)
        await self.provider.create_method(rest_api_id, resource_id, method_definition)
        logger.info(
            "options_method_created",
            rest_api_id=rest_api_id,
            resource_id=resource_id,
            headers=sorted(method_definition.response_parameters),
        )

    async def _delete_options_method(self, rest_api_id: str, resource_id: str) -> None:
        try:
            await self.provider.delete_method(rest_api_id, resource_id, OPTIONS_METHOD)
        except GatewayResourceNotFoundError:
            logger.debug("options_method_already_absent", rest_api_id=rest_api_id, resource_id=resource_id)

    async def _patch_options_method(
        self, rest_api_id: str, resource_id: str, old: CorsConfig, new: CorsConfig
    ) -> None:
        operations = generate_operations(old, new)
        if not operations:
            return

        updates = (
            ("method_response", self.provider.update_method_response, method_response_operations(operations)),
            ("integration_response", self.provider.update_integration_response, operations),
        )
        for target, update, batch in updates:
            try:
                await update(rest_api_id, resource_id, OPTIONS_METHOD, self.status_code, batch)
            except GatewayResourceNotFoundError:
                # A missing response already lacks what a remove targets; adds are created on patch
                logger.debug(
                    "cors_response_not_found",
                    rest_api_id=rest_api_id,
                    resource_id=resource_id,
                    target=target,
                )

        logger.info(
            "cors_headers_patched",
            rest_api_id=rest_api_id,
            resource_id=resource_id,
            operations=[operation.to_provider() for operation in operations],
        )
