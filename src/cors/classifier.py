"""Change classification between two CORS configurations."""

import structlog

from src.cors.models import SECONDARY_FIELDS, ChangeAction, CorsConfig

logger = structlog.get_logger(__name__)


def requires_rebuild(old: CorsConfig, new: CorsConfig) -> bool:
    """
    Origin and methods shape the OPTIONS method itself, so changing either
    means deleting and recreating it. Methods compare as a set.
    """
    return old.allow_origin != new.allow_origin or set(old.allow_methods) != set(new.allow_methods)


def changed_fields(old: CorsConfig, new: CorsConfig) -> list[str]:
    """Secondary fields whose values differ, in patch order.

    Header lists compare as plain sequences, so reordering counts as a change.
    """
    return [field for field in SECONDARY_FIELDS if getattr(old, field) != getattr(new, field)]


def classify(old: CorsConfig | None, new: CorsConfig | None) -> ChangeAction:
    """Classify the action needed to move the OPTIONS method from `old` to `new`."""
    if old is None and new is None:
        return ChangeAction.NONE
    if old is None:
        return ChangeAction.CREATE
    if new is None:
        return ChangeAction.DELETE
    if requires_rebuild(old, new):
        return ChangeAction.REBUILD

    changed = changed_fields(old, new)
    if changed:
        logger.debug("cors_fields_changed", fields=changed)
        return ChangeAction.PATCH
    return ChangeAction.NONE
