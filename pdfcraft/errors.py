"""Exceptions raised while working with PDF documents."""


class PdfError(Exception):
    """Base class for all PDF errors."""


class ObjectNotFoundError(PdfError, LookupError):
    """An object id does not exist in the document."""

    def __init__(self, object_id):
        self.object_id = tuple(object_id)
        super().__init__(f"object {self.object_id[0]} {self.object_id[1]} R not found")


class ReferenceLimitError(PdfError):
    """A chain of references is longer than the allowed limit."""

    def __init__(self):
        super().__init__("reference chain exceeds the dereference limit")


class ReferenceCycleError(PdfError):
    """A cycle was found while following references."""

    def __init__(self, object_id):
        self.object_id = tuple(object_id)
        super().__init__(f"reference cycle at object {self.object_id[0]} {self.object_id[1]} R")


class ObjectTypeError(PdfError, TypeError):
    """An object has a different type than expected."""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, found {found}")


class DictionaryKeyError(PdfError, LookupError):
    """A key is missing from a dictionary."""

    def __init__(self, key):
        self.key = key
        name = key.decode("latin-1") if isinstance(key, bytes) else str(key)
        super().__init__(f"missing dictionary key /{name}")


class PageNumberNotFoundError(PdfError, LookupError):
    """A page number does not exist in the document."""

    def __init__(self, page_number):
        self.page_number = page_number
        super().__init__(f"page number {page_number} not found")


class TextStringDecodeError(PdfError, ValueError):
    """A text string could not be decoded."""

    def __init__(self):
        super().__init__("could not decode text string")