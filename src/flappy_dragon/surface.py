"""
surface.py: The drawing and control capabilities the game needs from its host.
"""

from typing import Protocol, Tuple

Color = Tuple[int, int, int]


class Surface(Protocol):
    """
    A character-cell display. Coordinates are (column, row) with (0, 0) at
    the top left; cells outside the grid are ignored.
    """

    def cls(self) -> None:
        ...

    def cls_bg(self, color: Color) -> None:
        ...

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None:
        ...

    def print(self, x: int, y: int, text: str) -> None:
        ...

    def print_centered(self, y: int, text: str) -> None:
        ...

    def request_quit(self) -> None:
        ...
