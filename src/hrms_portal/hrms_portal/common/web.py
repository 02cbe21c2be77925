from __future__ import annotations

from typing import Mapping

from flask import flash, request, url_for

from ..core.exceptions import ApiError, ValidationError
from ..table import DataTable, TableQuery


def table_context(table: DataTable, query: TableQuery, endpoint: str, **view_args) -> dict:
    """Template context for the shared ``_data_table.html`` macro."""

    def link(args: Mapping) -> str:
        return url_for(endpoint, **view_args, **args)

    return {
        "table": table.render(),
        "table_query": query,
        "table_endpoint": url_for(endpoint, **view_args),
        "sort_url": lambda key: link(query.sort_args(key)),
        "page_url": lambda page: link(query.page_args(page)),
        "size_url": lambda size: link(query.size_args(size)),
    }


def load_rows(loader, **kwargs) -> list:
    """Call a list use case; on failure flash the reason and show no rows."""
    try:
        return loader(**kwargs)
    except ValidationError as e:
        flash(str(e), "warning")
    except ApiError:
        flash("The HR service is unavailable right now. Please try again.", "danger")
    return []


def table_query(app, args=None) -> TableQuery:
    """Table state from the request arguments (or a posted form)."""
    return TableQuery.from_args(
        request.args if args is None else args,
        default_page_size=app.config["DEFAULT_PAGE_SIZE"],
        page_size_options=app.config["PAGE_SIZE_OPTIONS"],
    )


def table_options(app) -> dict:
    """Page-size settings every screen passes to its DataTable."""
    return {
        "initial_page_size": app.config["DEFAULT_PAGE_SIZE"],
        "page_size_options": app.config["PAGE_SIZE_OPTIONS"],
    }


def selected_indices(form) -> list[int]:
    out = []
    for raw in form.getlist("selected"):
        try:
            out.append(int(raw))
        except ValueError:
            continue
    return out
