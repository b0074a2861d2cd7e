"""Bar code rectangles and their content stream drawing operations."""

_WIDTH = 9.0
_NARROW_WIDTH = 6.53
_HEIGHT = 10.0

_COLORS = {"0": "1 1 1 rg\n", "1": "0 0 0 rg\n"}


def convert_number_to_bits(num, size):
    """Binary digits of ``num`` padded to ``size``, least significant first."""
    if num < 0:
        raise ValueError("number must not be negative")
    binary = format(num, "b")
    if len(binary) > size:
        raise ValueError(f"{num} does not fit in {size} bits")
    return binary.zfill(size)[::-1]


def generate_barcode(page, code):
    """Rectangles ``(x, y, w, h, bit)`` encoding a page number and a code."""
    if not 0 < page <= 255:
        raise ValueError("Page number should be within range: 1-255")
    if not 0 <= code <= 511:
        raise ValueError("Bar code should be within range: 0-511")
    page_bits = convert_number_to_bits(page, 8)
    code_bits = convert_number_to_bits(code, 9)
    layout = [
        (_WIDTH, "0"),
        *((_WIDTH, bit) for bit in page_bits),
        (_WIDTH, code_bits[0]),
        (_NARROW_WIDTH, "0"),
        *((_WIDTH, bit) for bit in code_bits[1:5]),
        (_WIDTH, "1"),
        (_WIDTH, "0"),
        *((_WIDTH, bit) for bit in code_bits[5:]),
    ]
    rects = []
    x = 0.0
    for width, bit in layout:
        rects.append((x, 0.0, width, _HEIGHT, bit))
        x += width
    return rects


def _fmt(value):
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def generate_operations(rects):
    """Content stream text filling each rectangle in white (0) or black (1)."""
    parts = []
    current_color = "\0"
    for x, y, w, h, bit in rects:
        if bit != current_color:
            parts.append(_COLORS.get(bit, "\n"))
            current_color = bit
        parts.append(f"{_fmt(x)} {_fmt(y)} {_fmt(w)} {_fmt(h)} re\nf\n")
    return "".join(parts)