"""Lazily decoded image textures (local files, raw bytes or remote URLs)."""

import io
import logging
from pathlib import Path
from typing import Optional

import requests
from PIL import Image

logger = logging.getLogger("ShowDeck.render.texture")


class Texture:
    """An image decoded on first use.

    Sources are a file path, raw encoded bytes, or a URL fetched with requests.
    """

    def __init__(self, path: Optional[Path] = None, data: Optional[bytes] = None,
                 url: Optional[str] = None):
        if sum(x is not None for x in (path, data, url)) != 1:
            raise ValueError("Texture needs exactly one of path, data or url")
        self.path = Path(path) if path is not None else None
        self.url = url
        self._data = data
        self._image: Optional[Image.Image] = None

    @classmethod
    def from_path(cls, path: str | Path) -> "Texture":
        return cls(path=Path(path))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Texture":
        return cls(data=data)

    @classmethod
    def from_url(cls, url: str) -> "Texture":
        return cls(url=url)

    def _read(self) -> bytes:
        if self._data is not None:
            return self._data
        if self.path is not None:
            return self.path.read_bytes()
        response = requests.get(self.url, timeout=30)
        response.raise_for_status()
        logger.info(f"Fetched texture from {self.url}")
        return response.content

    def load(self) -> Image.Image:
        """Decode (once) and return the RGBA image."""
        if self._image is None:
            image = Image.open(io.BytesIO(self._read()))
            self._image = image.convert("RGBA")
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self.load().size

    @property
    def source(self) -> str:
        if self.path is not None:
            return str(self.path)
        if self.url is not None:
            return self.url
        return "<bytes>"

    def __repr__(self) -> str:
        return f"Texture({self.source})"
