"""Handler classification — pure predicates over type identity."""

from handler_authz.classify._classifiers import (
    AnyClassifier,
    MarkerClassifier,
    NamingClassifier,
    RegistryClassifier,
)

__all__ = ["AnyClassifier", "MarkerClassifier", "NamingClassifier", "RegistryClassifier"]
