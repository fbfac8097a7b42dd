"""API gateway: forwards each service prefix to its upstream."""

from estates.gateway.app import create_gateway_app, match_route

__all__ = ["create_gateway_app", "match_route"]
