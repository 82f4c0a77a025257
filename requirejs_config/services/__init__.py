from .assets import AssetsHelper
from .locale import RequestLocaleProvider, StaticLocaleProvider
from .namespace_mapping import NamespaceMapping
from .parameters import ParameterBag, ParameterNotFoundError


__all__ = [
    "AssetsHelper",
    "NamespaceMapping",
    "ParameterBag",
    "ParameterNotFoundError",
    "RequestLocaleProvider",
    "StaticLocaleProvider",
]
