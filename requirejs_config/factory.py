import logging
from typing import Optional

from .configuration import ConfigurationBuilder
from .core.config import Config
from .services import (
    AssetsHelper,
    NamespaceMapping,
    ParameterBag,
    RequestLocaleProvider,
    StaticLocaleProvider,
)


logger = logging.getLogger(__name__)


def create_namespace_mapping() -> NamespaceMapping:
    mapping = NamespaceMapping()
    for namespace, directory in Config.namespaces().items():
        mapping.register_namespace(namespace, directory)
    return mapping


def create_assets_helper() -> AssetsHelper:
    return AssetsHelper(
        base_path=Config.ASSETS_BASE_PATH,
        base_urls=Config.asset_base_urls(),
        version=Config.ASSETS_VERSION or None,
    )


def create_builder(accept_language: Optional[str] = None, locale: Optional[str] = None) -> ConfigurationBuilder:
    """Wire a ConfigurationBuilder from application settings.

    Args:
        accept_language: Raw Accept-Language header used for negotiation.
        locale: Explicit locale that bypasses negotiation.

    Returns:
        A fresh builder with paths, options and the almond flag applied.
    """
    if locale:
        locale_provider = StaticLocaleProvider(locale)
    else:
        locale_provider = RequestLocaleProvider(accept_language, Config.supported_locales(), Config.DEFAULT_LOCALE)

    settings = Config.load_requirejs_file()
    builder = ConfigurationBuilder(
        locale_provider,
        create_assets_helper(),
        ParameterBag({"debug": Config.APP_DEBUG}),
        create_namespace_mapping(),
        base_url=Config.REQUIREJS_BASE_URL,
        shim=settings.get("shim"),
        deps=settings.get("deps"),
        priority=settings.get("priority"),
    )

    for name, locations in (settings.get("paths") or {}).items():
        builder.set_path(name, locations)
    for name, value in (settings.get("options") or {}).items():
        builder.add_option(name, value)
    builder.set_use_almond(Config.REQUIREJS_USE_ALMOND)

    return builder
