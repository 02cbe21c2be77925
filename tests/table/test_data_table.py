from __future__ import annotations

import pytest

from src.hrms_portal.hrms_portal.core.enums import SortDirection
from src.hrms_portal.hrms_portal.core.exceptions import ValidationError
from src.hrms_portal.hrms_portal.table import Badge, Column, DataTable, RowAction


def people():
    return [
        {"name": "Bob", "age": 30},
        {"name": "Ann", "age": 25},
        {"name": "Cid", "age": 25},
    ]


def columns():
    return [
        Column("name", "Name", sortable=True),
        Column("age", "Age", sortable=True, sort_type="number"),
        Column("note", "Note"),
    ]


def letters(n):
    return [{"name": chr(ord("a") + i)} for i in range(n)]


def names(rows):
    return [r["name"] for r in rows]


def test_empty_rows_render_one_placeholder_spanning_every_column():
    view = DataTable([], columns()).render()

    assert view.is_empty
    assert view.colspan == 3
    assert view.empty_message == "No results found."
    assert view.range_label == "0-0 of 0"
    assert view.total_pages == 1


def test_colspan_counts_selection_and_actions_columns():
    view = DataTable([], columns(), selectable=True, actions=lambda row: []).render()
    assert view.colspan == 5
    assert view.has_actions


def test_two_clicks_on_a_column_toggle_direction_and_keep_ties_stable():
    table = DataTable(people(), columns())

    table.sort_by("age")
    assert names(table.visible_rows) == ["Ann", "Cid", "Bob"]

    table.sort_by("age")
    assert table.sort.direction is SortDirection.DESC
    assert names(table.visible_rows) == ["Bob", "Ann", "Cid"]


def test_clicking_another_column_restarts_ascending():
    table = DataTable(people(), columns(), default_sort_column="age", default_sort_direction="desc")
    table.sort_by("name")
    assert table.sort.column == "name"
    assert table.sort.direction is SortDirection.ASC
    assert names(table.visible_rows) == ["Ann", "Bob", "Cid"]


def test_non_sortable_column_ignores_clicks():
    table = DataTable(people(), columns())
    table.sort_by("note")
    assert table.sort.column is None
    assert names(table.visible_rows) == ["Bob", "Ann", "Cid"]


def test_clear_sort_returns_to_input_order():
    table = DataTable(people(), columns(), default_sort_column="name")
    table.clear_sort()
    assert names(table.visible_rows) == ["Bob", "Ann", "Cid"]


def test_search_filters_and_reports_the_query():
    seen = []
    table = DataTable(people(), columns(), on_search=seen.append)

    table.search("an")

    assert names(table.visible_rows) == ["Ann"]
    assert seen == ["an"]
    assert table.render().search_query == "an"


def test_default_search_value_is_applied_before_the_first_render():
    table = DataTable(people(), columns(), default_search_value="cid")
    assert names(table.visible_rows) == ["Cid"]


def test_search_always_goes_back_to_page_one():
    table = DataTable(letters(12), [Column("name", "Name")], initial_page_size=5)
    table.go_to_page(3)
    assert table.current_page == 3

    table.search("")

    assert table.current_page == 1


def test_pages_step_forward_and_back_within_range():
    table = DataTable(letters(5), [Column("name", "Name")], initial_page_size=2)

    table.next_page()
    assert names(table.visible_rows) == ["c", "d"]
    table.next_page()
    table.next_page()
    assert table.current_page == 3
    assert names(table.visible_rows) == ["e"]

    table.previous_page()
    table.previous_page()
    table.previous_page()
    assert table.current_page == 1


def test_page_size_change_resets_to_first_page():
    sizes = []
    table = DataTable(letters(30), [Column("name", "Name")], on_page_size_change=sizes.append)
    table.go_to_page(3)

    table.set_page_size(20)

    view = table.render()
    assert view.page == 1
    assert view.page_size == 20
    assert view.total_pages == 2
    assert view.range_label == "1-20 of 30"
    # only reported in manual mode
    assert sizes == []


def test_page_size_outside_the_options_is_rejected():
    table = DataTable(letters(3), [Column("name", "Name")])
    with pytest.raises(ValidationError):
        table.set_page_size(7)


def test_initial_page_size_is_always_offered():
    view = DataTable([], [Column("name", "Name")], initial_page_size=25).render()
    assert view.page_size_options == (5, 10, 20, 25, 50)


def test_select_all_takes_exactly_the_visible_page():
    picked = []
    table = DataTable(letters(5), [Column("name", "Name")], initial_page_size=2, selectable=True,
                      on_selection_change=picked.append)

    table.toggle_all(True)

    assert names(picked[-1]) == ["a", "b"]
    assert table.render().all_selected


def test_selection_does_not_follow_to_another_page():
    table = DataTable(letters(5), [Column("name", "Name")], initial_page_size=2, selectable=True)
    table.toggle_all(True)

    table.next_page()

    assert table.selected_rows == []
    assert not table.render().all_selected


def test_sorting_drops_index_selection():
    table = DataTable(people(), columns(), selectable=True)
    table.toggle_one(0, True)
    table.sort_by("name")
    assert table.selected_rows == []


def test_toggle_one_reports_rows_in_page_order():
    picked = []
    table = DataTable(letters(4), [Column("name", "Name")], selectable=True, on_selection_change=picked.append)

    table.toggle_one(2, True)
    table.toggle_one(0, True)
    table.toggle_one(2, False)

    assert [names(p) for p in picked] == [["c"], ["a", "c"], ["a"]]


def test_toggle_all_off_clears_the_page():
    table = DataTable(letters(3), [Column("name", "Name")], selectable=True)
    table.toggle_all(True)
    table.toggle_all(False)
    assert table.selected_rows == []


def test_row_key_selection_survives_page_changes():
    table = DataTable(
        letters(5),
        [Column("name", "Name")],
        initial_page_size=2,
        selectable=True,
        row_key=lambda row: row["name"],
    )
    table.toggle_one(1, True)
    table.next_page()
    table.toggle_one(0, True)

    assert names(table.selected_rows) == ["b", "c"]
    assert table.is_selected(0)


def test_keyed_render_slices_the_rows_once():
    table = DataTable(
        letters(6),
        [Column("name", "Name")],
        initial_page_size=3,
        selectable=True,
        row_key=lambda row: row["name"],
    )
    table.toggle_one(2, True)
    calls = []
    page_slice = table.page_slice

    def counting_slice():
        calls.append(1)
        return page_slice()

    table.page_slice = counting_slice
    view = table.render()

    assert [r.selected for r in view.rows] == [False, False, True]
    assert len(calls) == 1


def test_row_click_hands_back_the_row():
    clicked = []
    table = DataTable(people(), columns(), on_row_click=clicked.append)

    table.click_row(1)
    table.click_row(9)

    assert clicked == [{"name": "Ann", "age": 25}]
    assert all(r.clickable for r in table.render().rows)


def test_cells_use_render_and_fall_back_to_text():
    cols = [
        Column("name", "Name"),
        Column("age", "Age", render=lambda value, row: Badge(str(value), "info")),
        Column("missing", "Missing"),
    ]
    row = DataTable([{"name": "Ann", "age": 25}], cols).render().rows[0]

    assert [c.content for c in row.cells] == ["Ann", Badge("25", "info"), ""]


def test_actions_are_built_per_row():
    table = DataTable(people(), columns(), actions=lambda row: [RowAction("Open", f"/p/{row['name']}", method="get")])
    actions = table.render().rows[0].actions
    assert actions[0].href == "/p/Bob"
    assert actions[0].is_link


def test_headers_mark_the_active_sort():
    table = DataTable(people(), columns(), default_sort_column="age", default_sort_direction="desc")
    headers = {h.key: h for h in table.render().headers}
    assert headers["age"].direction is SortDirection.DESC
    assert headers["name"].direction is None
    assert not headers["note"].sortable


def test_render_pulls_a_stale_page_back_into_range():
    table = DataTable(letters(3), [Column("name", "Name")], initial_page_size=2)
    table.restore(page=40)

    view = table.render()

    assert view.page == 2
    assert table.pagination.page == 2
    assert not view.has_next
    assert view.has_previous


def test_restore_ignores_unknown_sort_columns():
    table = DataTable(people(), columns())
    table.restore(sort_column="salary", sort_direction="desc")
    assert table.sort.column is None


def test_disabled_pagination_shows_every_row():
    table = DataTable(letters(30), [Column("name", "Name")], pagination_enabled=False)
    view = table.render()
    assert len(view.rows) == 30
    assert view.total_pages == 1
    assert not view.pagination_enabled


def test_manual_pagination_reports_page_changes_and_keeps_rows_as_given():
    pages = []
    table = DataTable(
        letters(10),
        [Column("name", "Name")],
        manual_pagination=True,
        current_page=2,
        total_rows=40,
        on_page_change=pages.append,
    )

    view = table.render()
    assert len(view.rows) == 10
    assert view.page == 2
    assert view.total_pages == 4
    assert view.range_label == "11-20 of 40"

    table.next_page()
    table.search("a")
    assert pages == [3, 1]


def test_manual_pagination_without_a_callback_slices_locally():
    table = DataTable(letters(12), [Column("name", "Name")], manual_pagination=True, current_page=2)
    assert not table.manual_mode_active
    assert len(table.visible_rows) == 10
    assert table.current_page == 1


def test_sort_by_a_field_without_a_column_is_ignored():
    table = DataTable(people(), columns())
    table.sort_by("age_group")
    assert table.sort.column is None


def test_caller_rows_are_not_mutated():
    rows = people()
    table = DataTable(rows, columns())
    table.sort_by("name")
    table.search("a")
    table.render()
    assert rows == people()
