"""Paints an arranged layout onto a character grid."""

from ..core.types import Orientation
from .layout import LayoutBox, Rect
from .tree import CodeNode, ContainNode, ImageNode, ListNode, RuleNode, TextNode

BULLET = "• "


class TextCanvas:
    """Fixed-size grid of characters; writes outside the grid are clipped."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, ch: str):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.rows[y][x] = ch

    def write(self, x: int, y: int, value: str, max_width: int | None = None):
        if max_width is not None:
            value = value[:max(0, max_width)]
        for i, ch in enumerate(value):
            self.put(x + i, y, ch)

    def render(self) -> str:
        return "\n".join("".join(row).rstrip() for row in self.rows)


def _cells(rect: Rect) -> tuple[int, int, int, int]:
    return (int(round(rect.x)), int(round(rect.y)),
            int(round(rect.width)), int(round(rect.height)))


def _frame(canvas: TextCanvas, rect: Rect):
    x, y, w, h = _cells(rect)
    if w < 2 or h < 2:
        return
    for i in range(x + 1, x + w - 1):
        canvas.put(i, y, "─")
        canvas.put(i, y + h - 1, "─")
    for j in range(y + 1, y + h - 1):
        canvas.put(x, j, "│")
        canvas.put(x + w - 1, j, "│")
    canvas.put(x, y, "┌")
    canvas.put(x + w - 1, y, "┐")
    canvas.put(x, y + h - 1, "└")
    canvas.put(x + w - 1, y + h - 1, "┘")


def _first_leaf(box: LayoutBox) -> LayoutBox:
    while box.children:
        box = box.children[0]
    return box


def paint_box(canvas: TextCanvas, box: LayoutBox):
    node = box.node
    x, y, w, h = _cells(box.rect)

    if isinstance(node, TextNode):
        for i, line in enumerate(node.text.split("\n")[:max(h, 1)]):
            canvas.write(x, y + i, line, w)
    elif isinstance(node, RuleNode):
        if node.orientation == Orientation.ROWS:
            canvas.write(x, y, "─" * w)
        else:
            for j in range(h):
                canvas.put(x, y + j, "│")
    elif isinstance(node, ImageNode):
        width, height = node.texture.size
        canvas.write(x, y + h // 2, f"[image {width}x{height}]", w)
    elif isinstance(node, CodeNode):
        for i, line in enumerate(node.view.plain_lines()[:h]):
            canvas.write(x, y + i, line, w)
    elif isinstance(node, ContainNode):
        _frame(canvas, box.rect)
    elif isinstance(node, ListNode):
        for child in box.children:
            cx, cy, _, _ = _cells(_first_leaf(child).rect)
            canvas.write(cx - len(BULLET), cy, BULLET)

    for child in box.children:
        paint_box(canvas, child)


def paint(box: LayoutBox, width: int, height: int) -> str:
    canvas = TextCanvas(width, height)
    paint_box(canvas, box)
    return canvas.render()
