import logging

import pytest

from lazywindow.errors import InvalidArgumentError
from lazywindow.models import LazyWindowConfig, PageResult
from lazywindow.utils import measure_performance, process_pagination, setup_logging


class TestProcessPagination:
    """Test one-shot pagination"""

    def test_first_page(self):
        result = process_pagination(list(range(25)), 1, 10)
        assert isinstance(result, PageResult)
        assert result.page_data == list(range(10))
        assert result.has_next_page
        assert not result.has_previous_page
        assert result.consumed == 10

    def test_last_full_page_has_no_next(self):
        """Test that an exactly full last page reports no next page"""
        result = process_pagination(range(20), 2, 10)
        assert result.page_data == list(range(10, 20))
        assert not result.has_next_page
        assert result.has_previous_page

    def test_short_last_page(self):
        result = process_pagination(range(25), 3, 10)
        assert result.page_data == [20, 21, 22, 23, 24]
        assert not result.has_next_page

    def test_with_transform(self):
        """Test paging mapped data only maps the page"""
        calls = []
        result = process_pagination(range(100), 2, 3, lambda x: calls.append(x) or x * 10)
        assert result.page_data == [30, 40, 50]
        assert calls == [3, 4, 5], f"Transform calls: {calls}"
        assert result.has_next_page

    def test_next_page_check_does_not_consume(self, counting_source):
        """Test that has_next_page peeks without taking the element"""
        source = counting_source(range(10))
        result = process_pagination(source, 1, 4)
        assert result.has_next_page
        assert source.taken == [0, 1, 2, 3]
        assert source.take_next() == 4

    def test_invalid_page(self):
        with pytest.raises(InvalidArgumentError):
            process_pagination(range(10), 0, 10)


class TestMeasurePerformance:
    """Test performance measurement"""

    def test_reports_metrics(self):
        info = measure_performance("window", lambda: list(range(5)))
        assert info["operation"] == "window"
        assert info["success"] is True
        assert info["result"] == [0, 1, 2, 3, 4]
        assert info["result_size"] == 5
        assert info["execution_time_ms"] >= 0
        assert info["memory_usage_mb"] >= 0

    def test_reraises_failures(self):
        """Test that errors propagate to the caller"""
        def boom():
            raise InvalidArgumentError("bad")

        with pytest.raises(InvalidArgumentError):
            measure_performance("boom", boom)


class TestSetupLogging:
    """Test logging setup"""

    def test_returns_package_logger(self):
        logger = setup_logging(LazyWindowConfig(log_level="DEBUG"))
        assert isinstance(logger, logging.Logger)
        assert logger.name == "lazywindow"

    def test_exported_from_package(self):
        """Test that the logging and paging helpers are reachable from the package"""
        import lazywindow

        assert lazywindow.setup_logging is setup_logging
        assert lazywindow.process_pagination is process_pagination
        assert "setup_logging" in lazywindow.__all__
