"""Core constants: cache key format and shared literal values."""

# Full-response cache keys look like "propertyFullResponse::<id>".
CACHE_FULL_RESPONSE_SUFFIX = "FullResponse"
CACHE_KEY_SEP = "::"

# Route prefixes of the two backend families (also the gateway's default routes).
RENTAL_SERVICE_PREFIX = "/api/v1/rental-service"
CONSTRUCTION_SERVICE_PREFIX = "/api/v1/construction-service"

IMAGE_CONTENT_TYPE_PREFIX = "image/"
