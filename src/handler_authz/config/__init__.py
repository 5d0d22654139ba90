"""Configuration module for handler-authz."""

from __future__ import annotations

from handler_authz.config._config import ResolverConfig, configure, get_global_config

__all__ = ["ResolverConfig", "configure", "get_global_config"]
