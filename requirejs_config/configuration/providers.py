from typing import Any, Optional, Protocol


class LocaleProvider(Protocol):
    def get_locale(self) -> str: ...


class AssetUrlResolver(Protocol):
    def get_url(self, path: str) -> str: ...


class DebugFlagProvider(Protocol):
    def has_parameter(self, name: str) -> bool: ...

    def get_parameter(self, name: str) -> Any: ...


class NamespaceMapper(Protocol):
    def get_module_path(self, filename: str) -> Optional[str]: ...
