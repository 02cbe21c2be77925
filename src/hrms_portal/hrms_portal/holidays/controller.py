from __future__ import annotations

from flask import Flask, render_template, request, session

from ..common.access import ALL_ROLES, roles_required
from ..common.web import load_rows, table_context, table_options, table_query
from ..container import Container
from ..core.enums import HolidayType
from ..core.exceptions import ApiError
from ..filters.store import FilterStore, HolidayFilters
from ..table import DataTable
from .columns import holiday_columns


def register(app: Flask, container: Container) -> None:
    @app.route("/holidays", endpoint="holidays")
    @roles_required(*ALL_ROLES)
    def holidays():
        filters = FilterStore(session).update_from_args("holiday", HolidayFilters, request.args)
        query = table_query(app)

        rows = load_rows(
            container.holiday_service.list_rows,
            region=filters.region,
            holiday_type=filters.type,
            year=filters.year,
        )
        try:
            regions = container.holiday_service.regions()
        except ApiError:
            regions = []

        table = query.apply(
            DataTable(
                rows,
                holiday_columns(),
                search_placeholder="Search holidays...",
                default_sort_column="date",
                filters=filters,
                **table_options(app),
            )
        )
        return render_template(
            "holidays/list.html",
            **table_context(table, query, "holidays"),
            regions=regions,
            holiday_types=[t.value for t in HolidayType],
            active_page="holidays",
        )
