import math
from typing import Any
from dataclasses import dataclass, field

from .exceptions import (
    DataNotFoundError,
    RowheaderNotFoundError,
    ColumnheaderNotFoundError
)

__all__ = [
    "LookupTable"
]


@dataclass(frozen=True)
class LookupTable:
    """
    Implements a read-only lookup table with a column header, a row header and
    a data table.

    Values are only returned for exact header matches: the table never
    interpolates between its entries. Empty cells are stored as NaN and are
    reported as missing data.

    Two lookup mechanisms are provided:
    1.  Given a row header value and a column header value, returns the value
        in the data cell whose row index and column index correspond with the
        index of the row header value and the index of the column header value.

    2.  Given a row header value and a header value that is not present in the
        column header, returns the nearest column header value above (or below)
        it that has data in that row.
    """
    data: tuple[tuple[float, ...], ...] = field(default_factory=tuple)
    col_header: tuple[Any, ...] = field(default_factory=tuple)
    row_header: tuple[Any, ...] = field(default_factory=tuple)
    description: str = ""
    cols_description: str = ""
    rows_description: str = ""

    @classmethod
    def create(
        cls,
        row_header: list[Any] | dict[Any, str],
        col_header: list[Any] | dict[Any, str],
        data: list[list[float]],
        description: str = "",
        rows_description: str = "",
        cols_description: str = ""
    ) -> 'LookupTable':
        """
        Creates a lookup table.

        Parameters
        ----------
        row_header: list[Any] | dict[Any, str]
            List with the row header values or a dict of which the keys are
            the row header values and the dict values are strings that explain
            the meaning of the row header values.
        col_header: list[Any] | dict[Any, str]
            List the column header values or a dict of which the keys are
            the column header values and the dict values are strings that
            explain the meaning of the column header values.
        data: list[list[float]]
            A table of (floating) numbers implemented as a lists in a list.
            Rows shorter than the column header are padded with NaN.
        description: str, optional
            Describes the contents of the lookup table.
        rows_description: str, optional
            Describes the meaning of the row header values.
        cols_description: str, optional
            Describes the meaning of the column header values.

        Returns
        -------
        LookupTable
        """
        if len(data) != len(row_header):
            raise ValueError(
                f"The number of rows in `data` ({len(data)}) is not equal "
                f"to the length of `row_header` ({len(row_header)})."
            )
        rows = []
        for i, row in enumerate(data):
            if len(row) > len(col_header):
                raise ValueError(
                    f"The number of values ({len(row)}) in row {i} is greater "
                    f"than the number of columns ({len(col_header)})."
                )
            d = len(col_header) - len(row)
            rows.append(tuple(float(v) for v in row) + (float("nan"),) * d)
        return cls(
            tuple(rows),
            tuple(col_header),
            tuple(row_header),
            description,
            cols_description,
            rows_description
        )

    def _row_index(self, rowheader_val: Any) -> int:
        try:
            return self.row_header.index(rowheader_val)
        except ValueError:
            raise RowheaderNotFoundError(
                f"{rowheader_val!r} is not in the row header of table "
                f"'{self.description}'."
            ) from None

    def _col_index(self, colheader_val: Any) -> int:
        try:
            return self.col_header.index(colheader_val)
        except ValueError:
            raise ColumnheaderNotFoundError(
                f"{colheader_val!r} is not in the column header of table "
                f"'{self.description}'."
            ) from None

    def data_value(self, rowheader_val: Any, colheader_val: Any) -> float:
        """
        Returns the data value that belongs to the given row header value and
        the given column header value.

        Parameters
        ----------
        rowheader_val: Any
            Value present in the row header of the lookup table.
        colheader_val: Any
            Value present in the column header of the lookup table.

        Raises
        ------
        RowheaderNotFoundError, ColumnheaderNotFoundError
            If one of the header values is not present in the table.
        DataNotFoundError
            If the selected cell of the table is empty.

        Returns
        -------
        float
        """
        i = self._row_index(rowheader_val)
        j = self._col_index(colheader_val)
        value = self.data[i][j]
        if math.isnan(value):
            raise DataNotFoundError(
                f"No data for ({rowheader_val!r}, {colheader_val!r}) in table "
                f"'{self.description}'."
            )
        return value

    def get(self, rowheader_val: Any, colheader_val: Any, default: float | None = None) -> float | None:
        """
        Same as `data_value()`, but returns `default` instead of raising an
        exception when there is no data for the given header values.
        """
        try:
            return self.data_value(rowheader_val, colheader_val)
        except DataNotFoundError:
            return default

    def column(self, colheader_val: Any) -> dict[Any, float]:
        """
        Returns the non-empty cells of a column as a dict of which the keys are
        the row header values.
        """
        j = self._col_index(colheader_val)
        return {
            r: self.data[i][j]
            for i, r in enumerate(self.row_header)
            if not math.isnan(self.data[i][j])
        }

    def row(self, rowheader_val: Any) -> dict[Any, float]:
        """
        Returns the non-empty cells of a row as a dict of which the keys are
        the column header values.
        """
        i = self._row_index(rowheader_val)
        return {
            c: self.data[i][j]
            for j, c in enumerate(self.col_header)
            if not math.isnan(self.data[i][j])
        }

    def colheader_value(self, rowheader_val: Any, colheader_val: Any, above: bool = True) -> Any:
        """
        Returns the column header value nearest to `colheader_val` that has
        data in the row of `rowheader_val`. If `above` is True, the nearest
        column header value equal to or just greater than `colheader_val` is
        returned, else the one equal to or just smaller. Column header values
        must be in ascending order.

        Raises
        ------
        DataNotFoundError
            If `colheader_val` falls outside the range of the row.
        """
        keys = list(self.row(rowheader_val).keys())
        candidates = (
            [k for k in keys if k >= colheader_val] if above
            else [k for k in reversed(keys) if k <= colheader_val]
        )
        if not candidates:
            raise DataNotFoundError(
                f"{colheader_val!r} falls outside the data of row "
                f"{rowheader_val!r} in table '{self.description}'."
            )
        return candidates[0]

    def check_ascending(self, axis: str = "rows") -> None:
        """
        Checks that the data values of each column (`axis="rows"`) or of each
        row (`axis="cols"`) are strictly increasing, ignoring empty cells.

        Raises
        ------
        ValueError
            If the data is not in ascending order.
        """
        if axis == "rows":
            series = {c: list(self.column(c).items()) for c in self.col_header}
        else:
            series = {r: list(self.row(r).items()) for r in self.row_header}
        for key, items in series.items():
            for (h1, v1), (h2, v2) in zip(items, items[1:]):
                if not v2 > v1:
                    raise ValueError(
                        f"Data of {key!r} in table '{self.description}' is not "
                        f"ascending between {h1!r} ({v1}) and {h2!r} ({v2})."
                    )
