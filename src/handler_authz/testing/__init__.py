"""handler-authz testing utilities — assertions, isolation and fixtures.

- **Assertion helpers**: ``assert_denied``, ``assert_deferred``,
  ``assert_all_covered``.
- **Isolation**: ``isolated_authz`` context manager.
- **Fixtures**: ``authz_config``, ``authz_resolver``, ``isolated_authz_state``.

Example::

    from handler_authz.testing import assert_all_covered

    def test_every_admin_handler_is_marked():
        assert_all_covered(AdminController)
"""

from handler_authz.testing._assertions import (
    assert_all_covered,
    assert_deferred,
    assert_denied,
)
from handler_authz.testing._fixtures import (
    authz_config,
    authz_resolver,
    isolated_authz_state,
)
from handler_authz.testing._isolation import isolated_authz

__all__ = [
    "assert_all_covered",
    "assert_deferred",
    "assert_denied",
    "authz_config",
    "authz_resolver",
    "isolated_authz",
    "isolated_authz_state",
]
