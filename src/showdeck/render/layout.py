"""Layout engine for the render tree — natural sizes and split allocation."""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence
from pydantic import BaseModel

from ..core.types import Expand, Fit, HAlign, Orientation, SplitPolicy
from .tree import (
    AlignNode, CodeNode, ContainNode, HeadingNode, ImageNode, ListNode,
    RenderNode, RuleNode, StackNode, TextNode,
)

# Text size multipliers per heading level.
HEADING_SCALES = {1: 2.0, 2: 1.6, 3: 1.35, 4: 1.15, 5: 1.0, 6: 0.85}

# Reference viewport: a 16:9 surface at 120 units per ratio step uses 28/34/10.
REFERENCE_RATIO = 120.0


class TextMetrics(BaseModel):
    """Text and spacing measurements for one surface size."""
    model_config = {"frozen": True}

    base_text_size: float = 28.0
    line_height: float = 34.0
    padding: float = 10.0
    char_width_ratio: float = 0.6
    rule_thickness: float = 2.0
    scale_headings: bool = True

    @classmethod
    def for_viewport(cls, width: float, height: float) -> "TextMetrics":
        """Scale the base font with the largest 16:9 box that fits the viewport."""
        min_ratio = min(width / 16.0, height / 9.0)
        scale = min_ratio / REFERENCE_RATIO
        return cls(
            base_text_size=math.ceil(28.0 * scale),
            line_height=math.ceil(34.0 * scale),
            padding=math.ceil(10.0 * scale),
        )

    @classmethod
    def cells(cls) -> "TextMetrics":
        """One character per unit, used for terminal output."""
        return cls(
            base_text_size=1.0,
            line_height=1.0,
            padding=1.0,
            char_width_ratio=1.0,
            rule_thickness=1.0,
            scale_headings=False,
        )

    def text_size(self, level: Optional[int] = None) -> float:
        if level is None or not self.scale_headings:
            return self.base_text_size
        return self.base_text_size * HEADING_SCALES[level]

    def char_width(self, level: Optional[int] = None) -> float:
        return self.text_size(level) * self.char_width_ratio

    def line_height_for(self, level: Optional[int] = None) -> float:
        return self.line_height * self.text_size(level) / self.base_text_size


@dataclass
class Size:
    width: float
    height: float


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass
class LayoutBox:
    node: RenderNode
    rect: Rect
    level: Optional[int] = None
    children: list["LayoutBox"] = field(default_factory=list)

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()


def distribute(extent: float, natural: Sequence[float],
               policies: Sequence[SplitPolicy]) -> list[float]:
    """Sizes along the stacking axis.

    Fit children keep their natural size. Whatever is left is divided among
    Expand children in proportion to weight / sum(expand weights).
    """
    if len(natural) != len(policies):
        raise ValueError("natural sizes and policies must have the same length")
    fit_total = sum(n for n, p in zip(natural, policies) if isinstance(p, Fit))
    remaining = max(0.0, extent - fit_total)
    total_weight = sum(p.weight for p in policies if isinstance(p, Expand))

    sizes = []
    for n, policy in zip(natural, policies):
        if isinstance(policy, Expand):
            sizes.append(remaining * policy.weight / total_weight)
        else:
            sizes.append(n)
    return sizes


def _along(size: Size, orientation: Orientation) -> float:
    return size.height if orientation == Orientation.ROWS else size.width


def _across(size: Size, orientation: Orientation) -> float:
    return size.width if orientation == Orientation.ROWS else size.height


class LayoutEngine:
    """Measures and places RenderNode trees inside a rectangle."""

    def __init__(self, metrics: TextMetrics):
        self.metrics = metrics

    def bullet_indent(self, level: Optional[int] = None) -> float:
        return 2 * self.metrics.char_width(level)

    # ── Measurement ─────────────────────────────────────────────────────

    def measure(self, node: RenderNode, available: Size, level: Optional[int] = None) -> Size:
        m = self.metrics
        if isinstance(node, TextNode):
            lines = node.text.split("\n")
            width = max(len(line) for line in lines) * m.char_width(level)
            return Size(width, len(lines) * m.line_height_for(level))
        if isinstance(node, AlignNode):
            return self.measure(node.child, available, level)
        if isinstance(node, HeadingNode):
            return self.measure(node.child, available, node.level)
        if isinstance(node, StackNode):
            sizes = [self.measure(item.node, available, level) for item in node.items]
            along = sum(_along(s, node.orientation) for s in sizes)
            across = max((_across(s, node.orientation) for s in sizes), default=0.0)
            if node.orientation == Orientation.ROWS:
                return Size(across, along)
            return Size(along, across)
        if isinstance(node, ListNode):
            indent = self.bullet_indent(level)
            inner = Size(max(0.0, available.width - indent), available.height)
            sizes = [self.measure(item, inner, level) for item in node.items]
            return Size(
                indent + max((s.width for s in sizes), default=0.0),
                sum(s.height for s in sizes),
            )
        if isinstance(node, RuleNode):
            if node.orientation == Orientation.ROWS:
                return Size(0.0, m.rule_thickness)
            return Size(m.rule_thickness, 0.0)
        if isinstance(node, ImageNode):
            return self._fit_image(node, available)
        if isinstance(node, CodeNode):
            measured = node.view.measure(
                m.text_size(level), m.char_width_ratio, m.line_height / m.base_text_size,
            )
            return Size(measured.width, measured.height)
        if isinstance(node, ContainNode):
            inner = Size(
                max(0.0, available.width - 2 * m.padding),
                max(0.0, available.height - 2 * m.padding),
            )
            child = self.measure(node.child, inner, level)
            return Size(child.width + 2 * m.padding, child.height + 2 * m.padding)
        raise TypeError(f"Cannot measure {type(node).__name__}")

    def _fit_image(self, node: ImageNode, available: Size) -> Size:
        width, height = node.texture.size
        if width == 0 or height == 0:
            return Size(0.0, 0.0)
        scale = min(
            available.width * node.fit_ratio / width,
            available.height * node.fit_ratio / height,
        )
        return Size(width * scale, height * scale)

    # ── Placement ───────────────────────────────────────────────────────

    def fills(self, node: RenderNode) -> tuple[bool, bool]:
        """Whether node claims all available (width, height) inside an aligner.

        Rules span their container. Stacks always fill their cross axis, and
        fill their stacking axis when any child expands.
        """
        if isinstance(node, HeadingNode):
            return self.fills(node.child)
        if isinstance(node, RuleNode):
            return node.orientation == Orientation.ROWS, node.orientation == Orientation.COLUMNS
        if isinstance(node, StackNode):
            expands = any(isinstance(item.policy, Expand) for item in node.items)
            if node.orientation == Orientation.ROWS:
                return True, expands
            return expands, True
        return False, False

    def arrange(self, node: RenderNode, rect: Rect, level: Optional[int] = None) -> LayoutBox:
        box = LayoutBox(node=node, rect=rect, level=level)

        if isinstance(node, AlignNode):
            natural = self.measure(node.child, rect.size, level)
            fill_width, fill_height = self.fills(node.child)
            width = rect.width if fill_width else min(natural.width, rect.width)
            height = rect.height if fill_height else min(natural.height, rect.height)
            if node.align == HAlign.LEFT:
                x = rect.x
            elif node.align == HAlign.RIGHT:
                x = rect.x + rect.width - width
            else:
                x = rect.x + (rect.width - width) / 2
            y = rect.y + (rect.height - height) / 2
            box.children.append(self.arrange(node.child, Rect(x, y, width, height), level))

        elif isinstance(node, HeadingNode):
            box.children.append(self.arrange(node.child, rect, node.level))

        elif isinstance(node, StackNode):
            box.children.extend(self._arrange_stack(node, rect, level))

        elif isinstance(node, ListNode):
            indent = self.bullet_indent(level)
            inner_width = max(0.0, rect.width - indent)
            y = rect.y
            for item in node.items:
                height = self.measure(item, Size(inner_width, rect.height), level).height
                box.children.append(
                    self.arrange(item, Rect(rect.x + indent, y, inner_width, height), level)
                )
                y += height

        elif isinstance(node, ContainNode):
            pad = self.metrics.padding
            inner = Rect(
                rect.x + pad, rect.y + pad,
                max(0.0, rect.width - 2 * pad), max(0.0, rect.height - 2 * pad),
            )
            box.children.append(self.arrange(node.child, inner, level))

        return box

    def _arrange_stack(self, node: StackNode, rect: Rect, level: Optional[int]) -> list[LayoutBox]:
        orientation = node.orientation
        natural = [
            _along(self.measure(item.node, rect.size, level), orientation)
            for item in node.items
        ]
        extent = _along(rect.size, orientation)
        sizes = distribute(extent, natural, [item.policy for item in node.items])

        boxes = []
        offset = 0.0
        for item, size in zip(node.items, sizes):
            if orientation == Orientation.ROWS:
                child_rect = Rect(rect.x, rect.y + offset, rect.width, size)
            else:
                child_rect = Rect(rect.x + offset, rect.y, size, rect.height)
            boxes.append(self.arrange(item.node, child_rect, level))
            offset += size
        return boxes
