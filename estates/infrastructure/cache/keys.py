"""Cache key builders. Single place for key format.

Full-response keys look like ``propertyFullResponse::<id>``. Entity ids must
not contain CACHE_KEY_SEP to avoid ambiguous or colliding keys.
"""

from estates.core.constants import CACHE_FULL_RESPONSE_SUFFIX, CACHE_KEY_SEP
from estates.domain.enums import EntityType


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator."""
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def full_response_namespace(entity_type: EntityType) -> str:
    """Namespace holding full responses for one entity type."""
    return f"{entity_type.value}{CACHE_FULL_RESPONSE_SUFFIX}"


def full_response_key(entity_type: EntityType, entity_id: str) -> str:
    """Cache key for the full response of one entity."""
    _validate_key_component(entity_id, "entity_id")
    return f"{full_response_namespace(entity_type)}{CACHE_KEY_SEP}{entity_id}"
