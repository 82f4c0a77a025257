import copy
import json
import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from .providers import AssetUrlResolver, DebugFlagProvider, LocaleProvider, NamespaceMapper


logger = logging.getLogger(__name__)

DEBUG_PARAMETER = "debug"

_ABSOLUTE_LOCATION = re.compile(r"^(//|http|https)")
_JS_SUFFIX = re.compile(r"\.js$")


class BuilderFinalizedError(RuntimeError):
    """Raised when a builder is mutated after its configuration was read."""


class Configuration(Mapping):
    """Read-only RequireJS configuration produced by ``ConfigurationBuilder``.

    Values are deep-copied on construction, so later changes to the builder's
    inputs never leak into an already produced configuration.
    """

    def __init__(self, values: Mapping):
        self._values = MappingProxyType(copy.deepcopy(dict(values)))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._values)!r})"

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self._values))

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def to_script(self, variable: str = "require") -> str:
        """Render as the script a page includes before loading require.js."""
        return f"var {variable} = {self.to_json()};"


def optimize_shim(shim: Mapping) -> Dict[str, Any]:
    """Optimize shim declarations where possible.

    Empty ``deps`` lists are removed, entries left without fields are
    dropped, and entries holding nothing but ``deps`` collapse to the bare
    dependency list the loader accepts as shorthand.
    """
    optimized: Dict[str, Any] = {}
    for name, value in shim.items():
        if isinstance(value, (list, tuple)):
            entry = {"deps": list(value)}
        else:
            entry = dict(value)

        if "deps" in entry and len(entry["deps"]) == 0:
            del entry["deps"]

        if not entry:
            continue
        if "deps" in entry and len(entry) == 1:
            optimized[name] = entry["deps"]
        else:
            optimized[name] = entry

    return optimized


class ConfigurationBuilder:
    """Builds RequireJS configuration options from application services.

    One builder is used per configuration build. Setters accumulate state
    until ``get_configuration`` is called; from then on the builder is
    finalized and only ``get_configuration`` may be called again.
    """

    def __init__(
        self,
        locale_provider: LocaleProvider,
        asset_resolver: AssetUrlResolver,
        debug_flags: DebugFlagProvider,
        mapping: NamespaceMapper,
        base_url: str = "",
        shim: Optional[Mapping] = None,
        deps: Optional[Sequence[str]] = None,
        priority: Optional[Sequence[str]] = None,
    ):
        self._locale_provider = locale_provider
        self._asset_resolver = asset_resolver
        self._debug_flags = debug_flags
        self._mapping = mapping
        # Relative to the asset base URL
        self.base_url = base_url.strip("/")
        self.shim: Dict[str, Any] = dict(shim or {})
        self.deps: List[str] = list(deps or [])
        self.priority: List[str] = list(priority or [])

        self._options: Dict[str, Any] = {}
        self._paths: Dict[str, Union[str, List[str]]] = {}
        self._use_almond = False
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_mutable(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("Configuration has already been built; create a new builder")

    def add_option(self, name: str, value: Any) -> None:
        self._ensure_mutable()
        self._options[name] = value

    def set_path(self, name: str, locations: Union[str, Sequence[str]]) -> None:
        """Set a path definition, rewriting mapped module locations.

        Args:
            name: Module name as seen by the loader.
            locations: One location or an ordered list of fallbacks.
        """
        self._ensure_mutable()
        if isinstance(locations, str):
            locations = [locations]

        base_url = None
        resolved: List[str] = []
        for location in locations:
            if _ABSOLUTE_LOCATION.match(location):
                resolved.append(location)
                continue

            module_path = self._mapping.get_module_path(location)
            if not module_path:
                logger.warning(f"No namespace mapping for '{location}' (path '{name}'), using it unchanged")
                resolved.append(location)
                continue

            if base_url is None:
                base_url = self.get_base_url()
            module_path = _JS_SUFFIX.sub("", module_path)
            resolved.append(f"{base_url}/{module_path}")

        if len(resolved) == 1:
            self._paths[name] = resolved[0]
        else:
            self._paths[name] = resolved

    def set_use_almond(self, use_almond: bool) -> None:
        self._ensure_mutable()
        self._use_almond = bool(use_almond)

    def get_base_url(self) -> str:
        """Return the asset base URL without version query or trailing slash."""
        base_url = self._asset_resolver.get_url("")
        # Drop cache-busting ?version
        base_url = base_url.split("?", 1)[0]
        return base_url.rstrip("/")

    def get_script_url(self) -> str:
        return f"{self.get_base_url()}/{self.base_url}"

    def _almond_enabled(self) -> bool:
        if not self._use_almond:
            return False
        if not self._debug_flags.has_parameter(DEBUG_PARAMETER):
            return False
        return not self._debug_flags.get_parameter(DEBUG_PARAMETER)

    def get_configuration(self) -> Configuration:
        config: Dict[str, Any] = {
            "baseUrl": self.get_script_url(),
            "locale": self._locale_provider.get_locale(),
        }

        if self._paths:
            config["paths"] = self._paths
        if self.shim:
            config["shim"] = optimize_shim(self.shim)
        if self.deps:
            config["deps"] = self.deps
        if self.priority:
            config["priority"] = self.priority
        if self._almond_enabled():
            config["almond"] = True

        config.update(self._options)
        self._finalized = True
        return Configuration(config)
