"""Drawing surface capability consumed by the drawing built-ins.

The interpreter only ever talks to a surface through `DrawingSurface`, a
subset of an HTML canvas 2D context. `RecordingSurface` implements it by
recording each call, which is what the tests use. `NullSurface` discards
every call; the language server evaluates against it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from artlang.config import get_canvas_size

# Colour value that suppresses the corresponding fill or stroke.
NONE_COLOR = "none"


@runtime_checkable
class DrawingSurface(Protocol):
    width: float
    height: float
    fill_style: str
    stroke_style: str

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


@dataclass(frozen=True)
class Operation:
    type: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingSurface:
    """Surface that records operations instead of rendering them."""

    width: float = field(default_factory=lambda: get_canvas_size()[0])
    height: float = field(default_factory=lambda: get_canvas_size()[1])
    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    operations: list[Operation] = field(default_factory=list)

    def get_operations(self, kind: Optional[str] = None) -> list[Operation]:
        if kind is None:
            return list(self.operations)
        return [op for op in self.operations if op.type == kind]

    def clear_operations(self) -> None:
        self.operations.clear()

    def _record(self, kind: str, *args: Any) -> None:
        self.operations.append(Operation(kind, args))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rect", x, y, width, height)

    def arc(self, x, y, radius, start_angle, end_angle, counterclockwise=False) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, counterclockwise)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self) -> None:
        self._record("fill", self.fill_style)

    def stroke(self) -> None:
        self._record("stroke", self.stroke_style)


@dataclass
class NullSurface:
    """Surface that accepts and discards every drawing call.

    Styles are still tracked so built-ins that read them behave normally.
    """

    width: float = field(default_factory=lambda: get_canvas_size()[0])
    height: float = field(default_factory=lambda: get_canvas_size()[1])
    fill_style: str = "#000000"
    stroke_style: str = "#000000"

    def begin_path(self) -> None:
        pass

    def move_to(self, x: float, y: float) -> None:
        pass

    def line_to(self, x: float, y: float) -> None:
        pass

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        pass

    def arc(self, x, y, radius, start_angle, end_angle, counterclockwise=False) -> None:
        pass

    def close_path(self) -> None:
        pass

    def fill(self) -> None:
        pass

    def stroke(self) -> None:
        pass
