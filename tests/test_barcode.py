import pytest

from pdfcraft.barcode import convert_number_to_bits, generate_barcode, generate_operations


@pytest.mark.parametrize("num,size", [(1, 8), (200, 8), (511, 9), (0, 9), (255, 8)])
def test_bits_round_trip(num, size):
    bits = convert_number_to_bits(num, size)
    assert len(bits) == size
    assert set(bits) <= {"0", "1"}
    assert int(bits[::-1], 2) == num


def test_bits_too_large():
    with pytest.raises(ValueError):
        convert_number_to_bits(512, 9)


def test_bits_negative():
    with pytest.raises(ValueError):
        convert_number_to_bits(-1, 8)


def test_barcode_layout():
    rects = generate_barcode(5, 300)
    bits = [rect[4] for rect in rects]
    page_bits = convert_number_to_bits(5, 8)
    code_bits = convert_number_to_bits(300, 9)
    assert bits[0] == "0"
    assert bits[1:9] == list(page_bits)
    assert bits[9] == code_bits[0]
    assert bits[10] == "0"
    assert bits[11:15] == list(code_bits[1:5])
    assert bits[15:17] == ["1", "0"]
    assert bits[17:] == list(code_bits[5:])


def test_barcode_rects_are_contiguous():
    rects = generate_barcode(200, 511)
    assert rects[0][0] == 0.0
    for prev, cur in zip(rects, rects[1:]):
        assert cur[0] == pytest.approx(prev[0] + prev[2])
    assert all(rect[1] == 0.0 and rect[3] == 10.0 for rect in rects)
    assert rects[10][2] == 6.53
    assert all(rect[2] == 9.0 for i, rect in enumerate(rects) if i != 10)


@pytest.mark.parametrize("page,code", [(0, 1), (256, 1), (1, 512)])
def test_barcode_range_errors(page, code):
    with pytest.raises(ValueError):
        generate_barcode(page, code)


def test_operations_switch_colors():
    rects = [
        (0.0, 0.0, 9.0, 10.0, "0"),
        (9.0, 0.0, 9.0, 10.0, "0"),
        (18.0, 0.0, 9.0, 10.0, "1"),
    ]
    assert generate_operations(rects) == (
        "1 1 1 rg\n0 0 9 10 re\nf\n9 0 9 10 re\nf\n0 0 0 rg\n18 0 9 10 re\nf\n"
    )


def test_operations_unknown_bit():
    assert generate_operations([(0.0, 0.0, 1.0, 1.0, "x")]) == "\n0 0 1 1 re\nf\n"


def test_operations_one_fill_per_rect():
    rects = generate_barcode(17, 42)
    ops = generate_operations(rects)
    assert ops.count(" re\nf\n") == len(rects)
    assert ops.startswith("1 1 1 rg\n")


def test_operations_empty():
    assert generate_operations([]) == ""