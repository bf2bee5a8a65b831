"""Path - a sequence of move/line/quad/cubic/close elements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, NamedTuple, Union

from glide.types import GlideError

from glide_path import bezier
from glide_path.geometry import Affine, Rect
from glide_path.vec import Vec

if TYPE_CHECKING:
    from glide_path.measure import PathMeasure


class PathError(GlideError, ValueError):
    """Raised when a path is built or sampled in an invalid way."""


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Vec


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Vec


@dataclass(frozen=True, slots=True)
class QuadTo:
    control: Vec
    point: Vec


@dataclass(frozen=True, slots=True)
class CubicTo:
    control1: Vec
    control2: Vec
    point: Vec


@dataclass(frozen=True, slots=True)
class Close:
    pass


Element = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


class Segment(NamedTuple):
    """A drawable piece of a path with its start point included.

    ``subpath`` numbers the subpath the segment belongs to, so consumers can
    tell where the pen was lifted.
    """

    curve: bezier.Curve
    subpath: int


def _map_element(element: Element, affine: Affine) -> Element:
    if isinstance(element, MoveTo):
        return MoveTo(affine.apply(element.point))
    if isinstance(element, LineTo):
        return LineTo(affine.apply(element.point))
    if isinstance(element, QuadTo):
        return QuadTo(affine.apply(element.control), affine.apply(element.point))
    if isinstance(element, CubicTo):
        return CubicTo(
            affine.apply(element.control1),
            affine.apply(element.control2),
            affine.apply(element.point),
        )
    return element


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class Path:
    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._elements: list[Element] = []
        self._start: Vec | None = None
        self._current: Vec | None = None
        self._measure: PathMeasure | None = None
        for element in elements:
            self._append(element)

    # --- building ---

    def _append(self, element: Element) -> None:
        if isinstance(element, MoveTo):
            self._start = element.point
            self._current = element.point
        elif isinstance(element, Close):
            if self._current is None:
                return
            self._current = self._start
        else:
            if self._current is None:
                raise PathError(
                    f"{type(element).__name__} requires a current point; call move_to first"
                )
            self._current = element.point
        self._elements.append(element)
        self._measure = None

    def move_to(self, point: Vec) -> None:
        self._append(MoveTo(point))

    def line_to(self, point: Vec) -> None:
        self._append(LineTo(point))

    def quad_to(self, point: Vec, control: Vec) -> None:
        self._append(QuadTo(control, point))

    def curve_to(self, point: Vec, control1: Vec, control2: Vec) -> None:
        self._append(CubicTo(control1, control2, point))

    def close(self) -> None:
        self._append(Close())

    def add_path(self, other: Path) -> None:
        for element in other._elements:
            self._append(element)

    def add_curve(self, curve: bezier.Curve) -> None:
        """Append a line/quad/cubic given as control points, starting at the pen."""
        if len(curve) == 2:
            self.line_to(curve[1])
        elif len(curve) == 3:
            self.quad_to(curve[2], curve[1])
        elif len(curve) == 4:
            self.curve_to(curve[3], curve[1], curve[2])
        else:
            raise PathError(f"unsupported curve with {len(curve)} control points")

    # --- inspection ---

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def start_point(self) -> Vec | None:
        for element in self._elements:
            if isinstance(element, MoveTo):
                return element.point
        return None

    @property
    def current_point(self) -> Vec | None:
        return self._current

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Path({self._elements!r})"

    def segments(self) -> Iterator[Segment]:
        """Yield every drawable segment, including implicit closing lines."""
        subpath = -1
        start: Vec | None = None
        pen: Vec | None = None
        for element in self._elements:
            if isinstance(element, MoveTo):
                subpath += 1
                start = pen = element.point
            elif isinstance(element, Close):
                if pen is not None and start is not None and pen != start:
                    yield Segment((pen, start), subpath)
                pen = start
            else:
                assert pen is not None
                if isinstance(element, LineTo):
                    curve: bezier.Curve = (pen, element.point)
                elif isinstance(element, QuadTo):
                    curve = (pen, element.control, element.point)
                else:
                    curve = (pen, element.control1, element.control2, element.point)
                yield Segment(curve, subpath)
                pen = element.point

    def subpaths(self) -> list[Path]:
        result: list[Path] = []
        for element in self._elements:
            if isinstance(element, MoveTo) or not result:
                result.append(Path())
            result[-1]._append(element)
        return result

    @property
    def bounding_rect(self) -> Rect:
        """Tight bounds of the drawn geometry (control points excluded)."""
        points: list[Vec] = []
        for segment in self.segments():
            points.extend(bezier.extrema(segment.curve))
        if not points:
            for element in self._elements:
                if isinstance(element, MoveTo):
                    points.append(element.point)
        if not points:
            return Rect()
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    # --- derived paths ---

    def applying(self, affine: Affine) -> Path:
        return Path(_map_element(e, affine) for e in self._elements)

    def offset_by(self, dx: float, dy: float) -> Path:
        return self.applying(Affine.translation(dx, dy))

    def measure(self) -> PathMeasure:
        from glide_path.measure import PathMeasure

        if self._measure is None:
            self._measure = PathMeasure(self)
        return self._measure

    @property
    def length(self) -> float:
        return self.measure().length

    def trimmed(self, start: float, end: float) -> Path:
        """Sub-path between two fractions of the path's length."""
        return self.measure().trimmed(start, end)

    def flattened(self, tolerance: float = 0.05) -> list[tuple[list[Vec], bool]]:
        """Polylines per subpath, each paired with whether it is closed."""
        result: list[tuple[list[Vec], bool]] = []
        for element in self._elements:
            if isinstance(element, MoveTo):
                result.append(([element.point], False))
            elif isinstance(element, Close):
                if result:
                    result[-1] = (result[-1][0], True)
        for segment in self.segments():
            points = bezier.flatten(segment.curve, tolerance)
            result[segment.subpath][0].extend(points[1:])
        return result

    def svg_data(self) -> str:
        parts: list[str] = []
        for element in self._elements:
            if isinstance(element, MoveTo):
                parts.append(f"M{_fmt(element.point[0])} {_fmt(element.point[1])}")
            elif isinstance(element, LineTo):
                parts.append(f"L{_fmt(element.point[0])} {_fmt(element.point[1])}")
            elif isinstance(element, QuadTo):
                c, p = element.control, element.point
                parts.append(f"Q{_fmt(c[0])} {_fmt(c[1])} {_fmt(p[0])} {_fmt(p[1])}")
            elif isinstance(element, CubicTo):
                c1, c2, p = element.control1, element.control2, element.point
                parts.append(
                    f"C{_fmt(c1[0])} {_fmt(c1[1])} {_fmt(c2[0])} {_fmt(c2[1])} "
                    f"{_fmt(p[0])} {_fmt(p[1])}"
                )
            else:
                parts.append("Z")
        return " ".join(parts)
