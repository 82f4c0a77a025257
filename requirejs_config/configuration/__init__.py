"""Assembly of RequireJS loader configuration.

The builder only talks to the narrow protocols in ``providers``; concrete
implementations live in ``requirejs_config.services``.
"""

from .builder import BuilderFinalizedError, Configuration, ConfigurationBuilder, optimize_shim
from .providers import AssetUrlResolver, DebugFlagProvider, LocaleProvider, NamespaceMapper


__all__ = [
    "AssetUrlResolver",
    "BuilderFinalizedError",
    "Configuration",
    "ConfigurationBuilder",
    "DebugFlagProvider",
    "LocaleProvider",
    "NamespaceMapper",
    "optimize_shim",
]
