"""Resolver — decision types and the fail-closed PolicyResolver."""

from handler_authz.resolver._decision import (
    DEFER,
    DENY_ALL,
    DENY_ALL_ATTRIBUTE,
    ConfigAttribute,
    Decision,
    DecisionKind,
)
from handler_authz.resolver._resolver import PolicyResolver

__all__ = [
    "DEFER",
    "DENY_ALL",
    "DENY_ALL_ATTRIBUTE",
    "ConfigAttribute",
    "Decision",
    "DecisionKind",
    "PolicyResolver",
]
