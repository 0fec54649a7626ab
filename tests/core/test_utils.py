import pytest
from lxml import etree as ET

from table_toolkit.core.models import Position
from table_toolkit.core.utils import find_ancestor, local_name


class TestFindAncestor:
    """Test cases for find_ancestor."""

    def test_position_inside_table_cell_resolves_table(self, by_id):
        position = Position(by_id("t1-p"), 0)
        assert find_ancestor("table", position) is by_id("t1")

    def test_position_directly_in_table_resolves_that_table(self, by_id):
        """The containing element itself is the first candidate."""
        position = Position(by_id("t1"), 0)
        assert find_ancestor("table", position) is by_id("t1")

    def test_nearest_table_wins_for_nested_tables(self, by_id):
        assert find_ancestor("table", Position(by_id("nested-p"))) is by_id("nested")
        assert find_ancestor("table", Position(by_id("t2-cell"))) is by_id("t2")

    def test_element_input_starts_at_parent(self, by_id):
        # The nested table itself is skipped, its enclosing table is found
        assert find_ancestor("table", by_id("nested")) is by_id("t2")
        assert find_ancestor("tableCell", by_id("t1-p")) is by_id("t1-cell")

    def test_no_matching_ancestor_returns_none(self, by_id):
        assert find_ancestor("table", Position(by_id("intro"))) is None
        assert find_ancestor("figure", Position(by_id("t1-p"))) is None

    def test_none_input_returns_none(self):
        assert find_ancestor("table", None) is None

    def test_namespaced_elements_match_by_local_name(self):
        root = ET.fromstring(
            '<d:root xmlns:d="urn:doc"><d:table id="x"><d:p/></d:table></d:root>'
        )
        paragraph = root.find(".//{urn:doc}p")
        assert find_ancestor("table", Position(paragraph)).get("id") == "x"

    def test_lookup_is_stable_without_tree_changes(self, by_id):
        position = Position(by_id("t1-p"))
        assert find_ancestor("table", position) is find_ancestor("table", position)


def test_local_name_ignores_comments():
    root = ET.fromstring("<root><!-- note --><table/></root>")
    comment, table = list(root)
    assert local_name(comment) is None
    assert local_name(table) == "table"


def test_position_rejects_negative_offset(by_id):
    with pytest.raises(ValueError):
        Position(by_id("t1"), -1)


def test_position_before_element(by_id):
    position = Position.before(by_id("t2"))
    assert position.parent is by_id("t2").getparent()
    assert position.offset == 2
