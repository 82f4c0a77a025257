import logging
from typing import List, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)


def _normalize(tag: str) -> str:
    return tag.strip().replace("_", "-").lower()


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Return language tags from an Accept-Language header, best first."""
    if not header:
        return []

    weighted: List[Tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
        if quality > 0:
            weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


class StaticLocaleProvider:
    def __init__(self, locale: str):
        self.locale = locale

    def get_locale(self) -> str:
        return self.locale


class RequestLocaleProvider:
    """Negotiate the locale from a request's Accept-Language header.

    An exact match against a supported locale wins; otherwise the primary
    language subtag is compared. Supported locales are returned exactly as
    configured.
    """

    def __init__(self, accept_language: Optional[str], supported: Sequence[str], default: str):
        self.accept_language = accept_language
        self.supported = list(supported)
        self.default = default

    def get_locale(self) -> str:
        by_tag = {_normalize(locale): locale for locale in self.supported}
        by_language = {}
        for locale in self.supported:
            by_language.setdefault(_normalize(locale).split("-")[0], locale)

        for tag in parse_accept_language(self.accept_language):
            normalized = _normalize(tag)
            if normalized in by_tag:
                return by_tag[normalized]
            language = normalized.split("-")[0]
            if language in by_language:
                return by_language[language]

        logger.debug(f"No supported locale in '{self.accept_language}', using {self.default}")
        return self.default
