"""Layered configuration for handler-authz."""

from __future__ import annotations

from dataclasses import dataclass, field

from handler_authz._types import FreeFunctionPolicy
from handler_authz.markers._marker import MarkerSet

__all__ = [
    "ResolverConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_FREE_FUNCTIONS: set[str] = {"check", "defer"}


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable resolver configuration with merge semantics.

    Attributes:
        markers: Markers that count as an access-control declaration.
        free_functions: What to do with handlers that have no owning type.
            ``"check"`` applies the method-level check and denies
            uncovered functions. ``"defer"`` leaves them to another layer.
        log_decisions: Emit audit log records for every decision.
        inherit_type_markers: Whether type-level markers declared on a
            base class cover its subclasses. ``MarkerClassifier.for_config``
            applies the same setting to the ``@controller`` marker; a
            classifier built directly keeps inheriting.

    Example::

        config = ResolverConfig(log_decisions=True)
        merged = config.merge(free_functions="defer")
    """

    markers: MarkerSet = field(default_factory=MarkerSet.default)
    free_functions: FreeFunctionPolicy = "check"
    log_decisions: bool = False
    inherit_type_markers: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.markers, MarkerSet):
            raise ValueError(f"markers must be a MarkerSet, got {type(self.markers).__name__}")
        if not self.markers:
            raise ValueError("markers must contain at least one marker")
        if self.free_functions not in _VALID_FREE_FUNCTIONS:
            raise ValueError(
                f"free_functions must be one of {_VALID_FREE_FUNCTIONS!r}, "
                f"got {self.free_functions!r}"
            )

    def merge(
        self,
        *,
        markers: MarkerSet | None = None,
        free_functions: FreeFunctionPolicy | None = None,
        log_decisions: bool | None = None,
        inherit_type_markers: bool | None = None,
    ) -> ResolverConfig:
        """Return a new config with non-None overrides applied.

        Args:
            markers: Override for markers (ignored if None).
            free_functions: Override for free_functions (ignored if None).
            log_decisions: Override for log_decisions (ignored if None).
            inherit_type_markers: Override for inherit_type_markers (ignored if None).

        Returns:
            A new ``ResolverConfig`` with overrides merged.

        Example::

            base = ResolverConfig()
            app_cfg = base.merge(markers=base.markers.with_markers(PERMIT_ALL))
        """
        return ResolverConfig(
            markers=markers if markers is not None else self.markers,
            free_functions=(
                free_functions if free_functions is not None else self.free_functions
            ),
            log_decisions=log_decisions if log_decisions is not None else self.log_decisions,
            inherit_type_markers=(
                inherit_type_markers
                if inherit_type_markers is not None
                else self.inherit_type_markers
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = ResolverConfig()


def get_global_config() -> ResolverConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.free_functions)  # "check"
    """
    return _global_config


def configure(
    *,
    markers: MarkerSet | None = None,
    free_functions: FreeFunctionPolicy | None = None,
    log_decisions: bool | None = None,
    inherit_type_markers: bool | None = None,
) -> ResolverConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Resolvers built afterwards
    without an explicit config pick up the new values; existing
    resolvers keep the config they were built with.

    Returns:
        The updated global ``ResolverConfig``.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        markers=markers,
        free_functions=free_functions,
        log_decisions=log_decisions,
        inherit_type_markers=inherit_type_markers,
    )
    return _global_config


def _set_global_config(cfg: ResolverConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = ResolverConfig()
