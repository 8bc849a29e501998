"""
Helpers for applications built on lazywindow: logging setup, performance
measurement and one-shot pagination.
"""

import gc
import logging
import sys
import time
import tracemalloc
from typing import Any, Callable, Dict, Optional

from .models import LazyWindowConfig, PageRequest, PageResult, build_model, load_config
from .sequences import AdaptingSequence, WindowedSequence, as_source

logger = logging.getLogger(__name__)


def setup_logging(config: Optional[LazyWindowConfig] = None) -> logging.Logger:
    """Setup logging for the package from config (environment by default)"""
    config = config or load_config()
    logging.basicConfig(
        level=config.log_level,
        format=config.log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger("lazywindow")


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> Dict[str, Any]:
    """Measure time and peak memory of a function call"""

    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        return _performance_info(operation_name, start_time, True, result=result)
    except Exception as e:
        logger.error(f"{operation_name} failed after {(time.perf_counter() - start_time) * 1000:.2f} ms: {e}")
        raise
    finally:
        tracemalloc.stop()


def _performance_info(operation_name, start_time, success, result=None) -> Dict[str, Any]:
    execution_time_ms = (time.perf_counter() - start_time) * 1000
    _, peak = tracemalloc.get_traced_memory()
    info = {
        "operation": operation_name,
        "execution_time_ms": execution_time_ms,
        "memory_usage_mb": peak / 1024 / 1024,
        "success": success,
        "result": result,
        "result_size": len(result) if hasattr(result, "__len__") else None,
        "timestamp": time.time()
    }
    logger.debug(f"{operation_name} completed in {execution_time_ms:.2f} ms")
    return info


def process_pagination(source_data: Any, page_number: int, page_size: int,
                       transform: Optional[Callable] = None) -> PageResult:
    """
    Fetch one page from source_data, optionally mapping each element.

    has_next_page is exact: after the page is taken the source is asked
    whether it holds another element (peeking, not consuming, for iterables).
    """
    request = build_model(PageRequest, page_number=page_number, page_size=page_size)
    source = as_source(source_data)

    # window the raw source so skipped elements are never transformed
    window = WindowedSequence.from_bounds(source, request.to_bounds())
    page_data = list(window if transform is None else AdaptingSequence(window, transform))

    # a short page means the source ran out, no need to query it again
    has_next_page = len(page_data) == request.page_size and source.has_more()

    logger.debug(f"Page {request.page_number} (size {request.page_size}): "
                 f"{len(page_data)} elements, has_next_page={has_next_page}")

    return PageResult(
        page_data=page_data,
        current_page=request.page_number,
        page_size=request.page_size,
        has_next_page=has_next_page,
        has_previous_page=request.page_number > 1,
        consumed=window.cursor_index,
    )
