"""Vertex lists — orthogonal regions and fields of any dimension.

A vertex list (Esperança & Samet, 1998) is a set of weighted vertices
kept in *scanline order*: the last coordinate is the most significant,
earlier coordinates break ties.  The value of the encoded field at a
point q is the sum of the weights of all vertices dominating q.  After
thresholding (nonzero => inside) the field is an orthogonal polygon.

Every algorithm here walks the list one *slab* at a time (the maximal
leading run of vertices sharing the same last coordinate) and recurses
on the projected (n-1)-dimensional cross-section.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence

from orthopack.config import WEIGHT_TOLERANCE, is_zero

from .vertex import Vertex


class VertexList:
    """Scanline-sorted sequence of vertices.

    The constructor copies and sorts its input, so a VertexList is never
    observable in an unsorted state.  All operations return new lists.
    """

    __slots__ = ("_vertices",)

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        items = [v.clone() for v in vertices]
        if items:
            dim = items[0].dim
            for v in items:
                if v.dim != dim:
                    raise ValueError(
                        f"Mixed vertex dimensions in one list: {dim} vs {v.dim}"
                    )
            items.sort(key=Vertex.scan_key)
        self._vertices = items

    @classmethod
    def _trusted(cls, items: list[Vertex]) -> VertexList:
        # items must already be sorted, same-dimension and unshared
        obj = cls.__new__(cls)
        obj._vertices = items
        return obj

    # ── Sequence protocol ──────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._vertices)

    # Vertices handed out are copies; editing them cannot unsort the list.
    def __iter__(self) -> Iterator[Vertex]:
        return (v.clone() for v in self._vertices)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return VertexList._trusted([v.clone() for v in self._vertices[index]])
        return self._vertices[index].clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexList):
            return NotImplemented
        return self._vertices == other._vertices

    __hash__ = None

    def __repr__(self) -> str:
        return "VertexList(" + ", ".join(repr(v) for v in self._vertices) + ")"

    @property
    def dim(self) -> int | None:
        """Dimension of the vertices, ``None`` for an empty list."""
        return self._vertices[0].dim if self._vertices else None

    def clone(self) -> VertexList:
        return VertexList._trusted([v.clone() for v in self._vertices])

    def rotate_axes_forward(self) -> VertexList:
        return VertexList(v.clone().rotate_axes_forward() for v in self._vertices)

    def rotate_axes_backward(self) -> VertexList:
        return VertexList(v.clone().rotate_axes_backward() for v in self._vertices)

    # ── Slabs ──────────────────────────────────────────────────────

    def prefix_len(self) -> int:
        """Number of leading vertices sharing the first last-coordinate."""
        if not self._vertices:
            return 0
        c = self._vertices[0].last_coord
        n = 0
        for v in self._vertices:
            if v.last_coord != c:
                break
            n += 1
        return n

    def prefix(self) -> VertexList:
        return self[: self.prefix_len()]

    def remainder(self) -> VertexList:
        return self[self.prefix_len():]

    def split(self) -> tuple[VertexList, VertexList]:
        """Return ``(prefix, remainder)`` in one pass."""
        n = self.prefix_len()
        return self[:n], self[n:]

    def slabs(self) -> Iterator[tuple[float, VertexList]]:
        """Yield ``(coord, slab)`` for each slab, front to back.

        Equivalent to calling :meth:`split` repeatedly on the remainder.
        """
        items = self._vertices
        i, n = 0, len(items)
        while i < n:
            c = items[i].last_coord
            j = i
            while j < n and items[j].last_coord == c:
                j += 1
            yield c, VertexList._trusted([v.clone() for v in items[i:j]])
            i = j

    # ── Dimension change ───────────────────────────────────────────

    def project(self) -> VertexList:
        """Drop the last coordinate of every vertex.

        Only sorted when applied to a single slab (or an empty list).
        """
        return VertexList._trusted([v.project() for v in self._vertices])

    def unproject(self, h: float) -> VertexList:
        return VertexList._trusted([v.unproject(h) for v in self._vertices])

    # ── Algebra ────────────────────────────────────────────────────

    def normalized(self) -> VertexList:
        """Merge coincident vertices and drop those summing to zero."""
        out: list[Vertex] = []
        for v in self._vertices:
            if out and out[-1].position == v.position:
                out[-1].weight += v.weight
            else:
                if out and is_zero(out[-1].weight):
                    out.pop()
                out.append(v.clone())
        if out and is_zero(out[-1].weight):
            out.pop()
        return VertexList._trusted(out)

    def add(self, other: VertexList) -> VertexList:
        """Field sum of two lists (sorted merge, ties summed)."""
        if not isinstance(other, VertexList):
            raise TypeError(f"Expected VertexList, got {type(other).__name__}")
        a, b = self._vertices, other._vertices
        if a and b and a[0].dim != b[0].dim:
            raise ValueError(f"Dimension mismatch: {a[0].dim} vs {b[0].dim}")
        out: list[Vertex] = []
        i = j = 0
        while i < len(a) and j < len(b):
            cmp = a[i].compare(b[j])
            if cmp < 0:
                out.append(a[i].clone())
                i += 1
            elif cmp > 0:
                out.append(b[j].clone())
                j += 1
            else:
                w = a[i].weight + b[j].weight
                if not is_zero(w):
                    out.append(Vertex(w, a[i].position))
                i += 1
                j += 1
        out.extend(v.clone() for v in a[i:])
        out.extend(v.clone() for v in b[j:])
        return VertexList._trusted(out)

    def scale(self, scalar: float) -> VertexList:
        return VertexList._trusted([v.scale(scalar) for v in self._vertices])

    def translate(self, vector: Sequence[float]) -> VertexList:
        """Return a copy shifted by *vector*."""
        return VertexList(v.clone().translate(vector) for v in self._vertices)

    def value(self, point: Sequence[float]) -> float:
        """Field value at *point* by brute-force domination sum."""
        return sum(v.weight for v in self._vertices if v.dominates(point))

    def transform(self, f: Callable[[float], float]) -> VertexList:
        """Apply *f* to the field value at every point.

        In dimension 0 the field is a single number.  Otherwise the slabs
        are swept front to back, keeping the accumulated cross-section;
        each slab emits the difference between the transformed
        cross-section after it and the one before it.
        """
        if not self._vertices:
            return VertexList()
        if self.dim == 0:
            w = f(sum(v.weight for v in self._vertices))
            return VertexList._trusted([] if is_zero(w) else [Vertex(w, ())])
        out: list[Vertex] = []
        accumulated = VertexList()
        previous = VertexList()
        for coord, slab in self.slabs():
            accumulated = accumulated.add(slab.project())
            transformed = accumulated.transform(f)
            delta = transformed.add(previous.scale(-1))
            out.extend(delta.unproject(coord)._vertices)
            previous = transformed
        return VertexList._trusted(out)

    # ── Decomposition ──────────────────────────────────────────────

    def rectangles(self) -> list[VertexList]:
        """Decompose the field into (hyper-)boxes.

        Each box is a VertexList with 2**dim vertices.  In 2-D the four
        vertices are, in order: min corner, (max_x, min_y),
        (min_x, max_y), max corner.  A box covers [min, max) on each axis.
        """
        boxes: list[VertexList] = []
        if not self._vertices:
            return boxes
        if self.dim == 0:
            raise ValueError("Cannot decompose a zero-dimensional list")
        if self.dim == 1:
            prev_w = 0.0
            prev_x = float("-inf")
            for v in self._vertices:
                x = v.position[0]
                if not is_zero(prev_w) and x != prev_x:
                    boxes.append(VertexList._trusted([
                        Vertex(prev_w, (prev_x,)),
                        Vertex(-prev_w, (x,)),
                    ]))
                prev_w += v.weight
                prev_x = x
            return boxes

        profile = VertexList()
        prev_coord = None
        for coord, slab in self.slabs():
            for face in profile.rectangles():
                closing = [v.unproject(coord) for v in face._vertices]
                for v in closing:
                    v.weight = -v.weight
                boxes.append(VertexList._trusted(
                    face.unproject(prev_coord)._vertices + closing
                ))
            profile = profile.add(slab.project())
            prev_coord = coord
        return boxes

    def faces(self) -> list[VertexList]:
        """Horizontal (scanline) faces: the 1-D boxes of every slab."""
        if not self._vertices:
            return []
        if self.dim < 2:
            raise ValueError("faces() needs at least two dimensions")
        return [
            rect.unproject(coord)
            for coord, slab in self.slabs()
            for rect in slab.project().rectangles()
        ]


# ── Constructors and Boolean operations ────────────────────────────


def rectangle(
    min_corner: Sequence[float] = (0.0, 0.0),
    sides: Sequence[float] = (10.0, 10.0),
) -> VertexList:
    """Axis-aligned rectangle with its smallest corner at *min_corner*."""
    x, y = min_corner
    side_x, side_y = sides
    return VertexList._trusted([
        Vertex(1, (x, y)),
        Vertex(-1, (x + side_x, y)),
        Vertex(-1, (x, y + side_y)),
        Vertex(1, (x + side_x, y + side_y)),
    ])


def threshold(w: float) -> int:
    """Indicator of a strictly positive field value."""
    return 1 if w > WEIGHT_TOLERANCE else 0


def union(a: VertexList, b: VertexList) -> VertexList:
    return a.add(b).transform(threshold)


def intersection(a: VertexList, b: VertexList) -> VertexList:
    """Both inputs must be thresholded regions (field values 0 or 1)."""
    return a.add(b).transform(lambda w: 1 if w > 1.5 else 0)


def difference(a: VertexList, b: VertexList) -> VertexList:
    """Points of region *a* not in region *b*."""
    if not b:
        return a.clone()
    return a.add(b.scale(-1)).transform(threshold)


def rects_intersect(a: VertexList, b: VertexList) -> bool:
    """True iff the interiors of 2-D boxes *a* and *b* overlap."""
    (ax0, ay0), (ax1, ay1) = a[0].position, a[3].position
    (bx0, by0), (bx1, by1) = b[0].position, b[3].position
    return min(ax1, bx1) > max(ax0, bx0) and min(ay1, by1) > max(ay0, by0)
