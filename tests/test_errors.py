import pytest

from pdfcraft.errors import (
    DictionaryKeyError,
    ObjectNotFoundError,
    ObjectTypeError,
    PageNumberNotFoundError,
    PdfError,
    ReferenceCycleError,
    ReferenceLimitError,
    TextStringDecodeError,
)


def test_object_not_found_keeps_id():
    err = ObjectNotFoundError((3, 0))
    assert err.object_id == (3, 0)
    assert isinstance(err, PdfError)
    assert isinstance(err, LookupError)


def test_reference_cycle_keeps_id():
    err = ReferenceCycleError([7, 1])
    assert err.object_id == (7, 1)


def test_object_type_fields():
    err = ObjectTypeError("Dictionary", "Integer")
    assert err.expected == "Dictionary"
    assert err.found == "Integer"
    assert "Dictionary" in str(err)


def test_dictionary_key_message():
    err = DictionaryKeyError(b"Root")
    assert err.key == b"Root"
    assert "Root" in str(err)


def test_page_number_not_found():
    err = PageNumberNotFoundError(5)
    assert err.page_number == 5


@pytest.mark.parametrize("cls", [ReferenceLimitError, TextStringDecodeError])
def test_simple_errors_raise_as_pdf_error(cls):
    err = cls()
    with pytest.raises(PdfError) as info:
        raise err
    assert info.value is err
    assert issubclass(cls, PdfError)