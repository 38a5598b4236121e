"""
Patch operation generation for CORS header updates.

Only the secondary fields (allowed/exposed headers, max age, credentials) are
patched in place; origin and method changes go through a full rebuild.
"""

from src.cors.headers import patch_path, render_header
from src.cors.models import SECONDARY_FIELDS, CorsConfig, PatchOp, PatchOperation

# Method responses only declare that a header exists; "false" marks it optional.
METHOD_RESPONSE_HEADER_FLAG = "false"


def generate_operations(old: CorsConfig, new: CorsConfig) -> list[PatchOperation]:
    """
    Build the patch operations that move the response headers from `old` to `new`.

    Operations follow the field order in SECONDARY_FIELDS so identical input
    always yields an identical batch. Unchanged fields produce nothing, and an
    empty list is returned when no secondary field differs.
    """
    operations: list[PatchOperation] = []

    for field in SECONDARY_FIELDS:
        old_value = getattr(old, field)
        new_value = getattr(new, field)
        if old_value == new_value:
            continue

        path = patch_path(field)
        if new_value is None:
            operations.append(PatchOperation(op=PatchOp.REMOVE, path=path))
        elif old_value is None:
            operations.append(PatchOperation(op=PatchOp.ADD, path=path, value=render_header(new_value)))
        else:
            operations.append(PatchOperation(op=PatchOp.REPLACE, path=path, value=render_header(new_value)))

    return operations


def method_response_operations(operations: list[PatchOperation]) -> list[PatchOperation]:
    """Same batch for the method response, where header values are declaration flags."""
    return [
        operation
        if operation.op is PatchOp.REMOVE
        else operation.model_copy(update={"value": METHOD_RESPONSE_HEADER_FLAG})
        for operation in operations
    ]
