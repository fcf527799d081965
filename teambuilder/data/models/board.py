"""Hex board view model passed to the builder template."""

from pydantic import BaseModel, Field


class BoardRow(BaseModel):
    """Metadata for a single board row."""
    index: int
    offset: bool = Field(default=False, description="Odd rows are shifted half a hex")


class BoardView(BaseModel):
    """Board grid dimensions with per-row offsets."""
    rows: list[BoardRow] = Field(default_factory=list)
    cols: list[int] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.cols)

    @classmethod
    def create(cls, rows: int, cols: int) -> "BoardView":
        """Build a board of ``rows`` x ``cols`` hexes.

        Negative dimensions are clamped to zero.
        """
        rows = max(rows, 0)
        cols = max(cols, 0)
        return cls(
            rows=[BoardRow(index=i, offset=i % 2 == 1) for i in range(rows)],
            cols=list(range(cols)),
        )
