import numpy as np

from percolation_threshold.exceptions import OutOfRangeError
from percolation_threshold.union_find import WeightedQuickUnionUF, is_integer, require_positive_int

# neighbour offsets: left, right, up, down
DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))

class Percolation:
    """
    An n-by-n grid of sites, all blocked at creation.

    Two union-find structures are kept side by side. ``wqfGrid_TB`` holds a
    virtual top and a virtual bottom node and answers ``percolates()``.
    ``wqfGrid_full`` holds only the virtual top and answers ``isFull()``, so
    that bottom-row sites reached through the virtual bottom are not reported
    full (backwash).
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        self.gridSize = require_positive_int(n, "n")
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=np.bool_)

        self.wqfGrid_TB = WeightedQuickUnionUF(self.gridSquare + 2)
        self.wqfGrid_full = WeightedQuickUnionUF(self.gridSquare + 1)

        self.virtualTop = 0
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    @property
    def size(self) -> int:
        return self.gridSize

    # open the site[i,j] if it's not open yet
    def open_site(self, row: int, col: int):
        self.validState(row, col)

        if self.grid[row - 1][col - 1]:
            return

        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        node = self.flattenGrid(row, col) + 1

        for d_row, d_col in DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if self.isOnGrid(n_row, n_col) and self.grid[n_row - 1][n_col - 1]:
                neighbour = self.flattenGrid(n_row, n_col) + 1
                self.wqfGrid_TB.union(node, neighbour)
                self.wqfGrid_full.union(node, neighbour)

        ## top row
        if row == 1:
            self.wqfGrid_TB.union(self.virtualTop, node)
            self.wqfGrid_full.union(self.virtualTop, node)

        ## bottom row, percolation structure only
        if row == self.gridSize:
            self.wqfGrid_TB.union(self.virtualBottom, node)

    open = open_site

    # is site[i,j] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site[i,j] open and connected to the top row?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        node = self.flattenGrid(row, col) + 1
        return self.wqfGrid_full.connected(self.virtualTop, node)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def open_fraction(self) -> float:
        return self.openSite / self.gridSquare

    def percolates(self) -> bool:
        return self.wqfGrid_TB.connected(self.virtualTop, self.virtualBottom)

    def validState(self, row: int, col: int):
        if not (is_integer(row) and is_integer(col)):
            raise OutOfRangeError(f"site ({row!r}, {col!r}) must have integer coordinates")
        if not self.isOnGrid(row, col):
            raise OutOfRangeError(
                f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize
