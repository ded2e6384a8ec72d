# backend/throttling.py

"""
Anonymous throttles for the public storefront.

Rates come from REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'][<scope>].
Authenticated users fall through to the default "user" throttle.
"""

from rest_framework.throttling import AnonRateThrottle


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class PublicPollThrottle(AnonRateThrottle):
    """For order tracking polls."""

    scope = "public_poll"


class AssistantThrottle(AnonRateThrottle):
    scope = "assistant"
