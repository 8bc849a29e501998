import pytest

from lazywindow import assertion
from lazywindow.errors import InvalidArgumentError


class TestAssertions:
    """Test fail-fast argument checks"""

    def test_checks_return_the_value(self):
        """Test that passing checks hand the value back"""
        marker = object()
        assert assertion.not_null(marker, "marker") is marker
        assert assertion.has_text("  x ", "text") == "  x "
        assert assertion.not_empty([1], "items") == [1]
        assert assertion.greater(0, 1, "n") == 1
        assert assertion.greater_or_equal(0, 0, "n") == 0
        assert assertion.less(1, 2, "n") == 1
        assert assertion.less_or_equal(2, 2, "n") == 2
        assert assertion.between(5, 1, 5, "n") == 5

    def test_not_null_message(self):
        with pytest.raises(InvalidArgumentError, match=r"Argument \[source\] must not be null"):
            assertion.not_null(None, "source")

    def test_greater_or_equal_message(self):
        """Test the message names the argument, the boundary and the value"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            assertion.greater_or_equal(0, -1, "first")
        assert str(exc_info.value) == "Argument [first] must be greater or equal to 0 (was -1)"

    @pytest.mark.parametrize("value", [None, "", "   \t"])
    def test_has_text_rejects_blank(self, value):
        with pytest.raises(InvalidArgumentError):
            assertion.has_text(value, "text")

    def test_has_text_requires_a_name(self):
        with pytest.raises(InvalidArgumentError, match="'name' must not be null or empty"):
            assertion.has_text("value", "")

    @pytest.mark.parametrize("collection", [None, [], {}, ()])
    def test_not_empty_rejects_empty(self, collection):
        with pytest.raises(InvalidArgumentError):
            assertion.not_empty(collection, "items")

    @pytest.mark.parametrize("check,args", [
        (assertion.greater, (3, 3, "n")),
        (assertion.less, (3, 3, "n")),
        (assertion.less_or_equal, (4, 3, "n")),
    ])
    def test_boundaries(self, check, args):
        with pytest.raises(InvalidArgumentError):
            check(*args)

    def test_between_exclusive(self):
        """Test that exclusive bounds reject the endpoints"""
        assert assertion.between(3, 1, 5, "n", inclusive=False) == 3
        with pytest.raises(InvalidArgumentError, match="exclusive"):
            assertion.between(5, 1, 5, "n", inclusive=False)
        with pytest.raises(InvalidArgumentError, match="inclusive"):
            assertion.between(6, 1, 5, "n")

    def test_equal_types_or_null(self):
        """Test that mixed types are rejected while None is ignored"""
        assertion.equal_types_or_null(1, None, 2, None)
        assertion.equal_types_or_null()
        with pytest.raises(InvalidArgumentError, match="same type"):
            assertion.equal_types_or_null(1, "1")

    def test_error_is_a_value_error(self):
        """Test callers catching ValueError still see argument failures"""
        with pytest.raises(ValueError):
            assertion.greater(10, 1, "n")
