"""Import fixtures from handler_authz.testing for test discovery."""

from handler_authz.testing._fixtures import authz_config, authz_resolver, isolated_authz_state

__all__ = ["authz_config", "authz_resolver", "isolated_authz_state"]
