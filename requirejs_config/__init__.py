"""RequireJS loader configuration assembly and serving."""

from .configuration import BuilderFinalizedError, Configuration, ConfigurationBuilder, optimize_shim


__all__ = ["BuilderFinalizedError", "Configuration", "ConfigurationBuilder", "optimize_shim"]
