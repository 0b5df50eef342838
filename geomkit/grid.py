"""Fixed-size 2D grid with clipped coordinate access."""


class Grid:
    """A width x height grid of arbitrary values stored row-major.

    Out-of-range coordinates are clipped to the nearest edge cell, so
    ``get``/``set`` never raise for bad indices.
    """

    def __init__(self, width, height):
        self._width = abs(int(width))
        self._height = abs(int(height))
        self.clear()

    @classmethod
    def from_list(cls, width, height, values):
        """Build a grid from a flat row-major sequence of cell values."""
        grid = cls(width, height)
        for i, value in enumerate(values[:len(grid)]):
            grid._cells[i] = value
        return grid

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def __len__(self):
        return self._width * self._height

    def set(self, x, y, value):
        if self._cells:
            self._cells[self._index(x, y)] = value
        return self

    def get(self, x, y):
        """Return the value at (x, y), or None if the cell is empty.

        A grid with no cells reads as empty everywhere.
        """
        if not self._cells:
            return None
        return self._cells[self._index(x, y)]

    def has(self, x, y):
        return self.get(x, y) is not None

    def for_each(self, callback, reverse=False):
        """Visit every cell in row-major order (or the reverse of it).

        Args:
            callback: Called as ``callback(value, x, y, grid)``. Returning
                ``False`` stops the traversal.
            reverse: Start from the bottom-right cell instead.

        Returns:
            The grid itself.
        """
        xs = range(self._width)
        ys = range(self._height)
        if reverse:
            xs, ys = xs[::-1], ys[::-1]

        for y in ys:
            for x in xs:
                if callback(self._cells[self._index(x, y)], x, y, self) is False:
                    return self
        return self

    def clone(self):
        return Grid.from_list(self._width, self._height, self._cells)

    def clear(self):
        self._cells = [None] * (self._width * self._height)
        return self

    def clip_x(self, x):
        return _clip(x, 0, self._width - 1)

    def clip_y(self, y):
        return _clip(y, 0, self._height - 1)

    def to_list(self):
        return list(self._cells)

    def __str__(self):
        return ",".join("" if c is None else str(c) for c in self._cells)

    def _index(self, x, y):
        # Fractional coordinates truncate to their cell
        return int(self.clip_x(x)) + int(self.clip_y(y)) * self._width


def _clip(n, lo, hi):
    return min(max(n, lo), hi)
