from .models import PageRequest, WindowBounds, build_model
from .sequences import AdaptingSequence, WindowedSequence, as_source


class LazyCollection:
    """
    A chainable, lazy collection. Operators are recorded and turned into a
    chain of AdaptingSequence / WindowedSequence wrappers only when you
    iterate. Each iteration starts from a fresh view of the source, so
    list-backed collections can be iterated again while iterator-backed ones
    are single-pass.
    """
    def __init__(self, source, ops=None):
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", arg)

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", fn))

    def skip(self, n):
        return self.window(n, None)

    def take(self, n):
        return self.window(0, n)

    def window(self, first, count):
        bounds = build_model(WindowBounds, first=first, count=count)
        return self._with_op(("window", bounds))

    def page(self, page_number, page_size):
        """Get a specific page of results (1-indexed)"""
        request = build_model(PageRequest, page_number=page_number, page_size=page_size)
        return self._with_op(("window", request.to_bounds()))

    def paginate(self, page_size):
        """
        Yield lists of up to page_size elements from a single pass over the
        source; stops at the first empty page
        """
        request = build_model(PageRequest, page_number=1, page_size=page_size)
        seq = self.sequence()
        while True:
            page_data = list(WindowedSequence(seq, 0, request.page_size))
            if not page_data:
                break
            yield page_data

    # --------- forcing evaluation ----------
    def sequence(self):
        """Build the composed sequence for one pass over the source"""
        seq = as_source(self._source)
        for op, arg in self._ops:
            if op == "map":
                seq = AdaptingSequence(seq, arg)
            elif op == "window":
                seq = WindowedSequence.from_bounds(seq, arg)
        return seq

    def to_list(self):
        return list(self)

    def first(self, default=None):
        """Return the first element, or default if empty"""
        seq = self.sequence()
        if seq.has_more():
            return seq.take_next()
        return default

    def count(self):
        """Return the count of elements"""
        count = 0
        for _ in self:
            count += 1
        return count

    # --------- iterator protocol ----------
    def __iter__(self):
        seq = self.sequence()
        while seq.has_more():
            yield seq.take_next()

    # --------- helpers ----------
    def _with_op(self, op_tuple):
        return LazyCollection(self._source, self._ops + [op_tuple])
