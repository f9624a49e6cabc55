"""GraphQL surface of the gateway (strawberry)."""

from .resolvers import GatewayResolvers
from .schema import Query, Subscription, schema

__all__ = ["GatewayResolvers", "Query", "Subscription", "schema"]
