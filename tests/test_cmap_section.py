import pytest

from pdfcraft.cmap_section import (
    BfChar,
    BfRange,
    CMapParseError,
    CMapParseErrorKind,
    CsRange,
)


def test_sections_compare_by_content():
    assert CsRange([(0, 255, 1)]) == CsRange([(0, 255, 1)])
    assert BfChar([((1, 1), [0x41])]) != BfChar([((1, 1), [0x42])])


def test_bfrange_holds_targets():
    section = BfRange([((0, 2, 1), [[0x41], [0x42], [0x43]])])
    (low, high, _), targets = section.mappings[0]
    assert high - low + 1 == len(targets)


def test_parse_error_incomplete():
    err = CMapParseError(CMapParseErrorKind.INCOMPLETE)
    assert err.kind is CMapParseErrorKind.INCOMPLETE
    assert bool(err.incomplete) is True
    with pytest.raises(CMapParseError) as info:
        raise err
    assert info.value is err


def test_parse_error_default_kind():
    err = CMapParseError()
    assert err.kind is CMapParseErrorKind.ERROR
    assert not err.incomplete