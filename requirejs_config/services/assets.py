import re
import zlib
from typing import Optional, Sequence


_ABSOLUTE_URL = re.compile(r"^(//|https?://)")


class AssetsHelper:
    """Generate public URLs for static assets.

    Either a base path on the current host or one or more base URLs (CDN
    hosts) may be configured. With several base URLs the host is picked
    from a checksum of the asset path, so the same asset always lands on the
    same host.
    """

    def __init__(
        self,
        base_path: str = "",
        base_urls: Sequence[str] = (),
        version: Optional[str] = None,
        version_format: str = "%s?%s",
    ):
        base_path = base_path.strip("/")
        self.base_path = f"/{base_path}" if base_path else ""
        self.base_urls = [url.rstrip("/") for url in base_urls if url]
        self.version = version
        self.version_format = version_format

    def _base_for(self, path: str) -> str:
        if not self.base_urls:
            return self.base_path
        if len(self.base_urls) == 1:
            return self.base_urls[0]
        return self.base_urls[zlib.crc32(path.encode("utf-8")) % len(self.base_urls)]

    def get_url(self, path: str) -> str:
        if _ABSOLUTE_URL.match(path):
            return path

        url = f"{self._base_for(path)}/{path.lstrip('/')}"
        if self.version:
            url = self.version_format % (url, self.version)
        return url
