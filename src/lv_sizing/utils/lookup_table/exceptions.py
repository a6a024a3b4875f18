__all__ = [
    "DataNotFoundError",
    "RowheaderNotFoundError",
    "ColumnheaderNotFoundError",
]


class DataNotFoundError(KeyError):
    pass


class RowheaderNotFoundError(DataNotFoundError):
    pass


class ColumnheaderNotFoundError(DataNotFoundError):
    pass
