# gridpath/core/errors.py
#!/usr/bin/env python3
"""
Errors raised by the grid model and the search engine.

"No path" is not an error: it is reported as a not-found SearchResult.
"""


class GridError(ValueError):
    """Base class for malformed grid input."""


class InvalidDimension(GridError):
    pass


class OutOfBounds(GridError):
    def __init__(self, cell, width: int, height: int):
        super().__init__(f"cell {cell} outside {height}x{width} grid")
        self.cell = cell


class MissingEndpoints(GridError):
    def __init__(self, missing):
        super().__init__(f"grid has no {' / '.join(missing)} set")
        self.missing = tuple(missing)
