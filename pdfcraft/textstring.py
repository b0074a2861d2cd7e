"""PDF text strings: PDFDocEncoding, UTF-16BE and UTF-8."""

from .errors import TextStringDecodeError
from .objects import PdfString, StringFormat, as_str

_SPECIAL = {
    0x18: "\u02d8", 0x19: "\u02c7", 0x1A: "\u02c6", 0x1B: "\u02d9",
    0x1C: "\u02dd", 0x1D: "\u02db", 0x1E: "\u02da", 0x1F: "\u02dc",
    0x80: "\u2022", 0x81: "\u2020", 0x82: "\u2021", 0x83: "\u2026",
    0x84: "\u2014", 0x85: "\u2013", 0x86: "\u0192", 0x87: "\u2044",
    0x88: "\u2039", 0x89: "\u203a", 0x8A: "\u2212", 0x8B: "\u2030",
    0x8C: "\u201e", 0x8D: "\u201c", 0x8E: "\u201d", 0x8F: "\u2018",
    0x90: "\u2019", 0x91: "\u201a", 0x92: "\u2122", 0x93: "\ufb01",
    0x94: "\ufb02", 0x95: "\u0141", 0x96: "\u0152", 0x97: "\u0160",
    0x98: "\u0178", 0x99: "\u017d", 0x9A: "\u0131", 0x9B: "\u0142",
    0x9C: "\u0153", 0x9D: "\u0161", 0x9E: "\u017e", 0xA0: "\u20ac",
}
_UNDEFINED = {0x7F, 0x9F, 0xAD}

_DECODE = {b: _SPECIAL.get(b, chr(b)) for b in range(256) if b not in _UNDEFINED}
_ENCODE = {ch: b for b, ch in _DECODE.items()}


def encode_pdfdoc(text):
    """Encode text in PDFDocEncoding, dropping characters it cannot hold."""
    return bytes(_ENCODE[ch] for ch in text if ch in _ENCODE)


def decode_pdfdoc(data):
    """Decode PDFDocEncoding bytes; undefined bytes become U+FFFD."""
    return "".join(_DECODE.get(b, "\ufffd") for b in data)


def text_string(text):
    """A literal string for ASCII text, otherwise hex UTF-16BE with BOM."""
    if text.isascii():
        return PdfString(text.encode("ascii"), StringFormat.LITERAL)
    return PdfString(b"\xfe\xff" + text.encode("utf-16-be"), StringFormat.HEXADECIMAL)


def decode_text_string(obj):
    """Decode a text string object according to its byte order mark."""
    data = as_str(obj)
    if data.startswith(b"\xfe\xff"):
        body = data[2:]
        if len(body) % 2:
            body += b"\x00"
        try:
            return body.decode("utf-16-be")
        except UnicodeDecodeError:
            raise TextStringDecodeError() from None
    if data.startswith(b"\xef\xbb\xbf"):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise TextStringDecodeError() from None
    return decode_pdfdoc(data)