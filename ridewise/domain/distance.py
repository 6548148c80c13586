"""
Placeholder distance between two location labels.

Assumption
----------
Locations are free-text labels, not coordinates, so there is no real
geography to compute.  The "distance" is derived from a 32-bit polynomial
string hash (identical to Java's ``String.hashCode``), which is stable
across processes.  Python's built-in ``hash()`` is salted per interpreter
run and would make matching non-reproducible.

The hash difference wraps to signed 32-bit, as Java ``int`` subtraction
does.  The one departure is a difference of exactly ``-2**31``: Java's
``Math.abs`` leaves it negative, here it becomes ``2**31`` so the result
always stays in ``[0, 100)``.

Complexity: O(len(label)) per call.
"""

_INT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value %= _INT32
    return value - _INT32 if value > _INT32_MAX else value


def location_hash(label: str) -> int:
    """Signed 32-bit ``s[0]*31^(n-1) + ... + s[n-1]`` over UTF-16 code units."""
    data = label.encode("utf-16-be")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) % _INT32
    return _to_int32(h)


def placeholder_distance(location_a: str, location_b: str) -> int:
    """Return a pseudo-distance in ``[0, 100)`` between two labels."""
    diff = _to_int32(location_hash(location_a) - location_hash(location_b))
    return abs(diff) % 100
