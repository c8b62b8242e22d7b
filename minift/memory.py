"""Byte-buffer operations on writable buffers such as bytearray and memoryview."""

__all__ = [
    "zero",
    "mem_set",
    "mem_cpy",
    "mem_ccpy",
    "mem_chr",
    "mem_cmp",
    "mem_move",
]


def _check(n, *buffers):
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def zero(buffer, n):
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check(n, buffer)
    buffer[:n] = bytes(n)


def mem_set(buffer, value, length):
    """Fill the first ``length`` bytes with ``value`` reduced to a byte; return ``buffer``."""
    _check(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def mem_cpy(dst, src, n):
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    _check(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def mem_ccpy(dst, src, c, n):
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Return the index in ``dst`` just past the copied ``c``, or None if ``c``
    did not occur within the first ``n`` bytes.
    """
    _check(n, dst, src)
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    if found == -1:
        dst[:n] = chunk
        return None
    end = found + 1
    dst[:end] = chunk[:end]
    return end


def mem_chr(data, c, n):
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found == -1 else found


def mem_cmp(a, b, n):
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check(n, a, b)
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )


def mem_move(dst, src, length):
    """Copy ``length`` bytes from ``src`` to ``dst``, safe when they overlap; return ``dst``."""
    _check(length, dst, src)
    if length:
        dst[:length] = bytes(src[:length])
    return dst