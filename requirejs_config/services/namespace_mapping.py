import logging
from pathlib import Path
from typing import Dict, Optional, Union


logger = logging.getLogger(__name__)


class NamespaceMapping:
    """Maps filesystem locations to RequireJS module namespaces.

    A directory registered under ``app`` turns ``<dir>/views/main.js`` into
    the module path ``app/views/main.js``. Names that are already logical
    (``app/views/main``) resolve to themselves when their namespace is
    registered, whether or not the file exists yet.
    """

    def __init__(self):
        self._namespaces: Dict[str, Path] = {}

    @property
    def namespaces(self) -> Dict[str, Path]:
        return dict(self._namespaces)

    def register_namespace(self, namespace: str, path: Union[str, Path]) -> None:
        namespace = namespace.strip("/")
        if not namespace:
            raise ValueError("Namespace must not be empty")

        real_path = Path(path).resolve()
        if not real_path.exists():
            raise ValueError(f"The path '{path}' registered for namespace '{namespace}' does not exist")

        self._namespaces[namespace] = real_path
        logger.debug(f"Registered namespace '{namespace}' -> {real_path}")

    def get_module_path(self, filename: str) -> Optional[str]:
        candidate = Path(filename)
        if candidate.exists():
            module_path = self._from_filesystem(candidate.resolve())
            if module_path:
                return module_path

        if candidate.is_absolute():
            return None
        return self._from_logical_name(filename)

    def _from_filesystem(self, real_path: Path) -> Optional[str]:
        for namespace, root in self._sorted_namespaces():
            if root.is_file():
                if real_path == root:
                    return f"{namespace}{root.suffix}"
                continue
            try:
                relative = real_path.relative_to(root)
            except ValueError:
                continue
            if relative.parts:
                return f"{namespace}/{relative.as_posix()}"
        return None

    def _from_logical_name(self, name: str) -> Optional[str]:
        name = name.strip("/")
        for namespace, _ in self._sorted_namespaces():
            if name == namespace or name.startswith(f"{namespace}/"):
                return name
        return None

    def _sorted_namespaces(self):
        # Longest namespace first so nested registrations win
        return sorted(self._namespaces.items(), key=lambda item: len(item[0]), reverse=True)
