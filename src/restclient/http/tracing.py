import itertools
import threading

_sequence = itertools.count(1)
_sequence_lock = threading.Lock()


def next_trace_id() -> int:
    """Allocate the next request trace identifier for this process"""
    with _sequence_lock:
        return next(_sequence)
