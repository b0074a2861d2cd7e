"""PDF object model and serialisation.

Objects are represented with Python values: ``None`` (null), ``bool``,
``int``, ``float``, :class:`Name`, :class:`PdfString`, ``list`` (array),
:class:`Dictionary`, :class:`Stream` and ``(number, generation)`` tuples
for references.
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from enum import Enum

from .errors import DictionaryKeyError, ObjectTypeError, PdfError

_DELIMITERS = b"()<>[]{}/%#"


class StringFormat(Enum):
    LITERAL = "literal"
    HEXADECIMAL = "hexadecimal"


class Name(bytes):
    """A PDF name object."""

    def __new__(cls, value):
        if isinstance(value, str):
            value = value.encode("utf-8")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Name({bytes(self)!r})"


@dataclass
class PdfString:
    """A PDF string: raw bytes plus the form it is written in."""

    data: bytes
    format: StringFormat = StringFormat.LITERAL

    def __post_init__(self):
        if isinstance(self.data, str):
            self.data = self.data.encode("utf-8")
        else:
            self.data = bytes(self.data)


def _key(key):
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


def _value(value):
    if isinstance(value, str):
        return Name(value)
    if isinstance(value, bytearray):
        return bytes(value)
    return value


class Dictionary:
    """An ordered PDF dictionary with byte-string keys."""

    def __init__(self, items=None, **kwargs):
        self._items = {}
        if items is not None:
            pairs = items.items() if hasattr(items, "items") else items
            for k, v in pairs:
                self.set(k, v)
        for k, v in kwargs.items():
            self.set(k, v)

    def get(self, key):
        """Return the value for ``key``; raise DictionaryKeyError if absent."""
        k = _key(key)
        try:
            return self._items[k]
        except KeyError:
            raise DictionaryKeyError(k) from None

    def set(self, key, value):
        self._items[_key(key)] = _value(value)

    def has(self, key):
        return _key(key) in self._items

    def remove(self, key):
        """Remove ``key`` and return its value, or None if it was absent."""
        return self._items.pop(_key(key), None)

    def get_type(self):
        """Return the /Type name of this dictionary."""
        return as_name(self.get(b"Type"))

    def has_type(self, type_name):
        try:
            return self.get_type() == _key(type_name)
        except PdfError:
            return False

    def get_deref(self, key, doc):
        """Return the value for ``key``, following references through ``doc``."""
        return doc.dereference(self.get(key))[1]

    def items(self):
        return self._items.items()

    def keys(self):
        return self._items.keys()

    def values(self):
        return self._items.values()

    def copy(self):
        return Dictionary(self._items)

    def __contains__(self, key):
        return _key(key) in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        return isinstance(other, Dictionary) and self._items == other._items

    def __repr__(self):
        return f"Dictionary({self._items!r})"


@dataclass
class Stream:
    """A stream: a dictionary followed by raw content bytes."""

    dict: Dictionary = field(default_factory=Dictionary)
    content: bytes = b""
    allows_compression: bool = True

    def _filters(self):
        try:
            value = self.dict.get(b"Filter")
        except DictionaryKeyError:
            return []
        if isinstance(value, list):
            return [as_name(v) for v in value]
        return [as_name(value)]

    def decompressed_content(self):
        """Return the content with its filters undone."""
        data = self.content
        for name in self._filters():
            if name == b"FlateDecode":
                try:
                    data = zlib.decompress(data)
                except zlib.error as exc:
                    raise PdfError(f"cannot inflate stream: {exc}") from exc
            else:
                raise PdfError(f"unsupported filter {name.decode('latin-1')}")
        return data

    def compress(self):
        """Deflate the content if it has no filter yet and it gets smaller."""
        if not self.allows_compression or self.dict.has(b"Filter"):
            return
        packed = zlib.compress(self.content)
        if len(packed) < len(self.content):
            self.content = packed
            self.dict.set(b"Filter", Name(b"FlateDecode"))


def string_literal(value):
    """Create a literal PDF string from text or bytes."""
    return PdfString(value, StringFormat.LITERAL)


def is_reference(obj):
    return (
        isinstance(obj, tuple)
        and len(obj) == 2
        and all(isinstance(x, int) and not isinstance(x, bool) for x in obj)
    )


def kind_of(obj):
    """Name of the kind of PDF object ``obj`` is."""
    if obj is None:
        return "Null"
    if isinstance(obj, bool):
        return "Boolean"
    if isinstance(obj, int):
        return "Integer"
    if isinstance(obj, float):
        return "Real"
    if isinstance(obj, Name):
        return "Name"
    if isinstance(obj, (PdfString, bytes)):
        return "String"
    if isinstance(obj, list):
        return "Array"
    if isinstance(obj, Dictionary):
        return "Dictionary"
    if isinstance(obj, Stream):
        return "Stream"
    if is_reference(obj):
        return "Reference"
    return type(obj).__name__


def as_reference(obj):
    if not is_reference(obj):
        raise ObjectTypeError("Reference", kind_of(obj))
    return obj


def as_dict(obj):
    if not isinstance(obj, Dictionary):
        raise ObjectTypeError("Dictionary", kind_of(obj))
    return obj


def as_array(obj):
    if not isinstance(obj, list):
        raise ObjectTypeError("Array", kind_of(obj))
    return obj


def as_name(obj):
    if not isinstance(obj, Name):
        raise ObjectTypeError("Name", kind_of(obj))
    return obj


def as_stream(obj):
    if not isinstance(obj, Stream):
        raise ObjectTypeError("Stream", kind_of(obj))
    return obj


def as_int(obj):
    if isinstance(obj, bool) or not isinstance(obj, int):
        raise ObjectTypeError("Integer", kind_of(obj))
    return obj


def as_str(obj):
    """Raw bytes of a string object."""
    if isinstance(obj, PdfString):
        return obj.data
    if isinstance(obj, bytes) and not isinstance(obj, Name):
        return obj
    raise ObjectTypeError("String", kind_of(obj))


def _format_real(value):
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _write_name(name):
    out = bytearray(b"/")
    for byte in name:
        if 0x21 <= byte <= 0x7E and byte not in _DELIMITERS:
            out.append(byte)
        else:
            out += b"#%02X" % byte
    return bytes(out)


def _write_literal(data):
    out = bytearray(b"(")
    for byte in data:
        if byte in b"()\\":
            out += b"\\" + bytes([byte])
        elif byte == 0x0D:
            out += b"\\r"
        else:
            out.append(byte)
    out += b")"
    return bytes(out)


def _needs_separator(obj):
    return obj is None or isinstance(obj, (bool, int, float)) or is_reference(obj)


def _write_dict(d):
    out = bytearray(b"<<")
    for key, value in d.items():
        out += _write_name(key)
        if _needs_separator(value):
            out += b" "
        out += write_object(value)
    out += b">>"
    return bytes(out)


def write_object(obj):
    """Serialise a PDF object to bytes."""
    if obj is None:
        return b"null"
    if isinstance(obj, bool):
        return b"true" if obj else b"false"
    if isinstance(obj, int):
        return str(obj).encode()
    if isinstance(obj, float):
        return _format_real(obj).encode()
    if isinstance(obj, Name):
        return _write_name(obj)
    if isinstance(obj, PdfString):
        if obj.format is StringFormat.HEXADECIMAL:
            return b"<" + obj.data.hex().upper().encode() + b">"
        return _write_literal(obj.data)
    if isinstance(obj, bytes):
        return _write_literal(obj)
    if isinstance(obj, list):
        return b"[" + b" ".join(write_object(item) for item in obj) + b"]"
    if isinstance(obj, Dictionary):
        return _write_dict(obj)
    if isinstance(obj, Stream):
        d = obj.dict.copy()
        d.set(b"Length", len(obj.content))
        return _write_dict(d) + b"stream\n" + obj.content + b"\nendstream"
    if is_reference(obj):
        return f"{obj[0]} {obj[1]} R".encode()
    raise ObjectTypeError("PDF object", kind_of(obj))