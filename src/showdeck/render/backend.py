"""Rendering backend contract used by element materialization."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..core.types import HAlign, Orientation, SplitPolicy
from .code import CodeView
from .texture import Texture


class RenderBackend(ABC):
    """Primitives the composition engine asks a backend for.

    Nodes are opaque to the engine; only the backend inspects them.
    """

    @abstractmethod
    def align(self, node: Any, align: HAlign) -> Any:
        """Wrap node with a left, center or right alignment adapter."""

    @abstractmethod
    def stack(self, orientation: Orientation,
              children: Sequence[tuple[Any, SplitPolicy]]) -> Any:
        """Arrange nodes along one axis with fit or weighted-expand sizing."""

    @abstractmethod
    def text(self, value: str, color: str) -> Any: ...

    @abstractmethod
    def label(self, value: str) -> Any:
        """Plain text that takes the surface's default color."""

    @abstractmethod
    def heading(self, node: Any, level: int) -> Any: ...

    @abstractmethod
    def bullet_list(self, items: Sequence[Any]) -> Any: ...

    @abstractmethod
    def delimiter(self, orientation: Orientation) -> Any: ...

    @abstractmethod
    def image(self, texture: Texture) -> Any: ...

    @abstractmethod
    def code(self, view: CodeView) -> Any: ...

    @abstractmethod
    def contain(self, node: Any) -> Any:
        """Wrap node in a padded container frame."""

    @abstractmethod
    def native(self, value: Any) -> Any:
        """Adopt a value produced by a backend-native builder."""
