"""Unit tests for LinkSequenceBuilder."""

import pytest

from pagelinks.models.errors import InvalidOptionsError
from pagelinks.models.link_item import Gap, NextControl, PageLink, PreviousControl
from pagelinks.models.options import PaginationOptions
from pagelinks.pagination.link_sequence_builder import (
    LinkSequenceBuilder,
    build_link_sequence,
    rel_value,
)


def describe(items) -> list[str]:
    """Compact form of a link sequence: ``<``, ``1``, ``[2]``, ``…``, ``>``."""
    described: list[str] = []
    for item in items:
        if isinstance(item, PreviousControl):
            described.append("<")
        elif isinstance(item, NextControl):
            described.append(">")
        elif isinstance(item, Gap):
            described.append("…")
        elif item.is_current:
            described.append(f"[{item.page}]")
        else:
            described.append(str(item.page))
    return described


class TestBuildLinkSequence:
    def test_first_page_of_many(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(1))

        assert describe(items) == ["<", "[1]", "2", "3", "4", "5", "6", "7", "8", "9", "…", "19", "20", ">"]

    def test_middle_page_has_two_gaps(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(10), {"inner_window": 2})

        assert describe(items) == ["<", "1", "2", "…", "8", "9", "[10]", "11", "12", "…", "19", "20", ">"]

    def test_window_covers_all_pages(self, make_metadata) -> None:
        items = build_link_sequence(make_metadata(page=5, per_page=10, total=100))

        assert describe(items) == ["<", "1", "2", "3", "4", "[5]", "6", "7", "8", "9", "10", ">"]

    @pytest.mark.parametrize("total", [0, 1, 10])
    def test_single_page_returns_empty_sequence(self, make_metadata, total: int) -> None:
        assert build_link_sequence(make_metadata(page=1, per_page=10, total=total)) == []

    def test_page_links_disabled_keeps_only_controls(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(3), {"page_links": False})

        assert describe(items) == ["<", ">"]
        assert items[0].target_page == 2
        assert items[1].target_page == 4

    def test_gap_hides_at_least_two_pages(self, twenty_pages) -> None:
        for page in range(1, 21):
            items = build_link_sequence(twenty_pages(page), {"inner_window": 2})
            for index, item in enumerate(items):
                if isinstance(item, Gap):
                    before, after = items[index - 1], items[index + 1]
                    assert after.page - before.page > 2

    def test_negative_window_raises(self, twenty_pages) -> None:
        with pytest.raises(InvalidOptionsError):
            build_link_sequence(twenty_pages(1), {"inner_window": -1})


class TestControls:
    def test_previous_disabled_on_first_page(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(1))
        previous, following = items[0], items[-1]

        assert previous.target_page is None
        assert previous.is_disabled is True
        assert previous.classes == ("disabled", "prev_page")
        assert previous.rel is None
        assert following.target_page == 2
        assert following.classes == ("next_page",)
        assert following.rel == "next"

    def test_next_disabled_on_last_page(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(20))
        previous, following = items[0], items[-1]

        assert following.target_page is None
        assert following.classes == ("disabled", "next_page")
        assert previous.target_page == 19
        assert previous.rel == "prev"

    def test_previous_to_first_page_is_start(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(2))

        assert items[0].rel == "prev start"

    @pytest.mark.parametrize("page", range(1, 21))
    def test_controls_disabled_only_at_the_ends(self, twenty_pages, page: int) -> None:
        items = build_link_sequence(twenty_pages(page))

        assert (items[0].target_page is None) == (page == 1)
        assert (items[-1].target_page is None) == (page == 20)

    def test_out_of_range_page_degrades(self, make_metadata) -> None:
        items = build_link_sequence(make_metadata(page=15, per_page=10, total=100))

        assert items[0].target_page == 14
        assert items[-1].target_page is None
        assert not any(isinstance(item, PageLink) and item.is_current for item in items)

    def test_default_labels(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(2))

        assert items[0].text == "← Previous"
        assert items[-1].text == "Next →"

    def test_labels_from_options(self, twenty_pages) -> None:
        items = build_link_sequence(
            twenty_pages(2),
            {"previous_label": "Back", "next_label": "More"},
        )

        assert items[0].text == "Back"
        assert items[-1].text == "More"

    def test_labels_from_catalog(self, twenty_pages, catalog) -> None:
        items = build_link_sequence(twenty_pages(2), label_resolver=catalog)

        assert items[0].text == "‹ Prev"
        assert items[-1].text == "Next ›"

    def test_odd_catalog_labels_are_kept_verbatim(self, twenty_pages) -> None:
        catalog = {"previous_label": "{0} back", "next_label": "Next }"}

        items = build_link_sequence(twenty_pages(2), label_resolver=catalog)

        assert items[0].text == "{0} back"
        assert items[-1].text == "Next }"


class TestPageLinks:
    def test_current_page(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(3))
        current = next(item for item in items if isinstance(item, PageLink) and item.is_current)

        assert current.page == 3
        assert current.text == "3"
        assert current.classes == ("current",)
        assert current.rel is None
        assert current.target_page is None

    def test_relative_hints(self, twenty_pages) -> None:
        items = build_link_sequence(twenty_pages(3))
        rels = {item.page: item.rel for item in items if isinstance(item, PageLink)}

        assert rels[1] == "start"
        assert rels[2] == "prev"
        assert rels[4] == "next"
        assert rels[5] is None

    def test_rel_value(self, twenty_pages) -> None:
        metadata = twenty_pages(2)

        assert rel_value(metadata, 1) == "prev start"
        assert rel_value(metadata, 3) == "next"
        assert rel_value(metadata, 7) is None


class TestLinkSequenceBuilder:
    def test_html_attributes_exclude_reserved_options(self, twenty_pages) -> None:
        sequence = LinkSequenceBuilder().build(
            twenty_pages(1),
            {"inner_window": 2, "param_name": "p", "style": "color:blue"},
        )

        assert sequence.html_attributes == {"class": "pagination", "style": "color:blue"}

    def test_auto_id_is_flagged(self, twenty_pages) -> None:
        sequence = LinkSequenceBuilder().build(twenty_pages(1), {"id": True})

        assert sequence.auto_id_requested is True
        assert "id" not in sequence.html_attributes

    def test_explicit_id_is_an_attribute(self, twenty_pages) -> None:
        sequence = LinkSequenceBuilder().build(twenty_pages(1), {"id": "nav"})

        assert sequence.auto_id_requested is False
        assert sequence.html_attributes["id"] == "nav"

    def test_accepts_options_model(self, twenty_pages) -> None:
        options = PaginationOptions(separator=" | ", container=False)
        sequence = LinkSequenceBuilder().build(twenty_pages(1), options)

        assert sequence.separator == " | "
        assert sequence.container is False

    def test_same_input_same_output(self, twenty_pages) -> None:
        builder = LinkSequenceBuilder()

        first = builder.build(twenty_pages(7), {"inner_window": 2})
        second = builder.build(twenty_pages(7), {"inner_window": 2})

        assert first == second

    def test_reused_builder_keeps_no_state(self, twenty_pages, make_metadata) -> None:
        builder = LinkSequenceBuilder()

        builder.build(twenty_pages(10), {"page_links": False, "style": "x"})
        sequence = builder.build(make_metadata(page=1, per_page=10, total=30))

        assert describe(sequence.items) == ["<", "[1]", "2", "3", ">"]
        assert sequence.html_attributes == {"class": "pagination"}

    def test_page_numbers(self, twenty_pages) -> None:
        sequence = LinkSequenceBuilder().build(twenty_pages(1))

        assert sequence.page_numbers() == [*range(1, 10), 19, 20]
        assert sequence.is_empty is False
