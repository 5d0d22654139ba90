"""Markers — access-control tags and the decorators that declare them."""

from handler_authz.markers._decorators import (
    authenticated,
    composed,
    controller,
    deny_all,
    mark,
    permit_all,
    post_authorize,
    pre_authorize,
    roles_allowed,
    secured,
)
from handler_authz.markers._marker import (
    AUTHENTICATED,
    CONTROLLER,
    DENY_ALL,
    PERMIT_ALL,
    POST_AUTHORIZE,
    PRE_AUTHORIZE,
    ROLES_ALLOWED,
    SECURED,
    Marker,
    MarkerDeclaration,
    MarkerSet,
    declarations_of,
)

__all__ = [
    "AUTHENTICATED",
    "CONTROLLER",
    "DENY_ALL",
    "Marker",
    "MarkerDeclaration",
    "MarkerSet",
    "PERMIT_ALL",
    "POST_AUTHORIZE",
    "PRE_AUTHORIZE",
    "ROLES_ALLOWED",
    "SECURED",
    "authenticated",
    "composed",
    "controller",
    "declarations_of",
    "deny_all",
    "mark",
    "permit_all",
    "post_authorize",
    "pre_authorize",
    "roles_allowed",
    "secured",
]
