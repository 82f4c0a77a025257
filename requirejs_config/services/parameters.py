from typing import Any, Dict, Optional


class ParameterNotFoundError(KeyError):
    pass


class ParameterBag:
    """Dictionary-backed application parameters (``debug`` and friends)."""

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        self._parameters = dict(parameters or {})

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(f"You have requested a non-existent parameter '{name}'")

    def set_parameter(self, name: str, value: Any) -> None:
        self._parameters[name] = value
