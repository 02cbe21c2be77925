from .cells import Badge, RowAction, Stacked
from .columns import Column
from .presenter import DataTable, TableView
from .query import TableQuery

__all__ = [
    "Badge",
    "Column",
    "DataTable",
    "RowAction",
    "Stacked",
    "TableQuery",
    "TableView",
]
