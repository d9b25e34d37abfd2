from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError

from lotr_sdk.schemas.fields import MovieField
from lotr_sdk.utils.filters import Filter
from lotr_sdk.utils.request_options import RequestOptions, SortDirection


def test_empty_options_produce_empty_query():
    assert RequestOptions().to_query_string() == ""


def test_parameter_order():
    options = RequestOptions(
        filters=[Filter.where("name").matches_regex("/Ring/i"), "budgetInMillions>100"],
        sort_field="name",
        sort_direction=SortDirection.DESC,
        limit=10,
        page=2,
        offset=5,
    )

    assert options.to_query_string() == (
        "name=/Ring/i&budgetInMillions>100&sort=name:desc&limit=10&page=2&offset=5"
    )


def test_single_filter_is_accepted():
    assert RequestOptions(filters=Filter.where("name").exists()).filters == ("name",)


def test_sort_needs_field_and_direction():
    assert RequestOptions(sort_field="name").to_query_string() == ""
    assert RequestOptions(sort_direction=SortDirection.ASC).to_query_string() == ""


def test_sort_field_accepts_enum():
    options = RequestOptions(sort_field=MovieField.ROTTEN_TOMATOES_SCORE, sort_direction="asc")
    assert options.to_query_string() == "sort=rottenTomatoesScore:asc"


def test_blank_sort_field_is_rejected():
    with pytest.raises(ValidationError):
        RequestOptions(sort_field=" ")


@pytest.mark.parametrize("kwargs", [{"limit": -1}, {"page": 0}, {"offset": -3}])
def test_out_of_range_paging_is_rejected(kwargs):
    with pytest.raises(ValidationError):
        RequestOptions(**kwargs)


def test_options_are_immutable():
    options = RequestOptions(limit=10)
    with pytest.raises(ValidationError):
        options.limit = 20


def test_for_page_overrides_page_and_drops_offset():
    options = RequestOptions(filters=["name"], limit=50, page=7, offset=100)

    paged = options.for_page(3)

    assert paged.page == 3
    assert paged.offset is None
    assert paged.limit == 50
    assert paged.filters == ("name",)
    assert options.page == 7


def test_query_string_round_trips_through_parser():
    """Encoded filter values decode back to what the caller wrote."""
    options = RequestOptions(
        filters=[Filter.where("name").equals("The Return of the King")],
        sort_field="name",
        sort_direction=SortDirection.DESC,
        limit=10,
        page=2,
    )

    assert parse_qsl(options.to_query_string()) == [
        ("name", "The Return of the King"),
        ("sort", "name:desc"),
        ("limit", "10"),
        ("page", "2"),
    ]
