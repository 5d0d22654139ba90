"""Introspection — answers "does this entity carry that marker"."""

from handler_authz.introspect._introspector import AttributeIntrospector, find_declarations

__all__ = ["AttributeIntrospector", "find_declarations"]
