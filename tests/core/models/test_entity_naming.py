"""
Unit tests for EntityNaming and EntriesInfoOptions
"""

import pytest
from pydantic import ValidationError

from pagelinks.models.entries_info import EntityNaming, EntriesInfoOptions


class TestEntityNaming:
    def test_derived_plural_and_key(self) -> None:
        naming = EntityNaming(singular="article comment")

        assert naming.plural == "article comments"
        assert naming.key == "article_comment"

    def test_explicit_values_kept(self) -> None:
        naming = EntityNaming(singular="datum", plural="data", key="measurements")

        assert naming.plural == "data"
        assert naming.key == "measurements"

    def test_whitespace_trimmed(self) -> None:
        naming = EntityNaming(singular="  entity  ")

        assert naming.singular == "entity"
        assert naming.plural == "entities"

    @pytest.mark.parametrize("count,expected", [(0, "entities"), (1, "entity"), (5, "entities")])
    def test_for_count(self, count: int, expected: str) -> None:
        assert EntityNaming(singular="entity").for_count(count) == expected

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EntityNaming(singular="")


class TestEntriesInfoOptions:
    def test_defaults_are_plain_text(self) -> None:
        options = EntriesInfoOptions()

        assert options.emphasis == ("", "")
        assert options.space == " "
        assert options.range_separator == "–"
        assert options.entry_name is None
