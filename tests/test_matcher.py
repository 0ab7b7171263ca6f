"""
Tests for leaf search over the notes tree.
"""

from vivaldi_notes.models import ExactValue, Substring
from vivaldi_notes.tree.matcher import find_content


class TestExactSearch:
    """Exact-value matching."""

    def test_root_leaf_matches(self):
        """Test that a root without children is tested directly."""
        root = {"id": "1", "content": "hello world", "children": []}
        assert find_content(root, "id", ExactValue("1")) == "hello world"

    def test_nested_leaf_matches(self):
        """Test that the search descends into children."""
        root = {"id": "1", "children": [{"id": "2", "content": "found me"}]}
        assert find_content(root, "id", ExactValue("2")) == "found me"

    def test_folder_never_matches(self, notes_tree):
        """Test that a node with children is not itself returned."""
        assert find_content(notes_tree, "id", ExactValue("10")) is None
        assert find_content(notes_tree, "id", ExactValue("root")) is None

    def test_first_match_in_document_order(self, notes_tree):
        """Test that the earliest leaf wins when several match."""
        assert find_content(notes_tree, "subject", ExactValue("Todo Queue")) == "write report"

    def test_empty_children_is_a_leaf(self, notes_tree):
        """Test that an empty children list still allows a match."""
        assert find_content(notes_tree, "id", ExactValue("20")) == "leaf by emptiness"

    def test_null_children_is_a_leaf(self):
        """Test that null children count as no children."""
        root = {"id": "1", "content": "x", "children": None}
        assert find_content(root, "id", ExactValue("1")) == "x"

    def test_non_string_content_is_no_match(self, notes_tree):
        """Test that a match without string content is skipped."""
        assert find_content(notes_tree, "id", ExactValue("30")) is None

    def test_non_string_key_field_is_no_match(self):
        """Test that only string fields are compared."""
        root = {"children": [{"id": 5, "content": "a"}, {"id": "5", "content": "b"}]}
        assert find_content(root, "id", ExactValue("5")) == "b"

    def test_exact_is_not_substring(self, notes_tree):
        """Test that a partial value does not match exactly."""
        assert find_content(notes_tree, "subject", ExactValue("Todo")) is None

    def test_missing_key_field(self, notes_tree):
        """Test that an absent field never matches."""
        assert find_content(notes_tree, "url", ExactValue("")) is None

    def test_non_object_nodes_are_skipped(self):
        """Test that irregular array entries do not break traversal."""
        root = {"children": [None, 3, "text", [], {"id": "ok", "content": "yes"}]}
        assert find_content(root, "id", ExactValue("ok")) == "yes"

    def test_non_object_root(self):
        """Test that a scalar or array document yields no match."""
        assert find_content([{"id": "1", "content": "x"}], "id", ExactValue("1")) is None
        assert find_content("text", "id", ExactValue("1")) is None

    def test_match_on_content_field(self):
        """Test using content itself as the key."""
        root = {"children": [{"content": "alpha"}, {"content": "beta"}]}
        assert find_content(root, "content", ExactValue("beta")) == "beta"


class TestSubstringSearch:
    """Substring matching."""

    def test_contains_match(self, notes_tree):
        """Test a substring of a leaf field."""
        assert find_content(notes_tree, "content", Substring("eggs")) == "milk, eggs"

    def test_case_sensitive(self, notes_tree):
        """Test that substring matching respects case."""
        assert find_content(notes_tree, "content", Substring("EGGS")) is None

    def test_first_match_wins(self, notes_tree):
        """Test that document order decides between substring matches."""
        assert find_content(notes_tree, "subject", Substring("Queue")) == "write report"

    def test_folder_content_ignored(self, notes_tree):
        """Test that folder fields are never matched."""
        assert find_content(notes_tree, "content", Substring("folder content")) is None

    def test_empty_substring_matches_first_leaf(self, notes_tree):
        """Test that an empty substring matches any string field."""
        assert find_content(notes_tree, "subject", Substring("")) == "milk, eggs"


class TestNoCriterion:
    """A key without a criterion never matches."""

    def test_returns_none(self, notes_tree):
        """Test that no criterion yields no content."""
        assert find_content(notes_tree, "id", None) is None


def test_deep_tree_does_not_exhaust_recursion():
    """Test that traversal handles nesting beyond the recursion limit."""
    leaf = {"id": "deep", "content": "bottom"}
    node = leaf
    for _ in range(5000):
        node = {"children": [node]}
    assert find_content(node, "id", ExactValue("deep")) == "bottom"
