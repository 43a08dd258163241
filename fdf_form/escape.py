from __future__ import annotations
"""PDF lexical escaping for FDF output.

Both routines work on the UTF-8 bytes of the input, so multi-byte characters are
escaped one byte at a time.
"""
from typing import Union

Text = Union[str, bytes, bytearray, memoryview]

_BACKSLASH = 0x5C
_STRING_DELIMS = (0x28, 0x29, _BACKSLASH)  # ( ) \
_HASH = 0x23


def _as_bytes(text: Text) -> bytes:
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    # lone surrogates (json, os.fsdecode) still become bytes to escape
    return str(text).encode("utf-8", errors="surrogatepass")


def escape_pdf_string(text: Text) -> bytes:
    """Escape text for use inside a PDF string literal ``( ... )``."""
    out = bytearray()
    for b in _as_bytes(text):
        if b in _STRING_DELIMS:
            out.append(_BACKSLASH)
            out.append(b)
        elif b < 32 or b > 126:
            out += b"\\%03o" % b  # octal code
        else:
            out.append(b)
    return bytes(out)


def escape_pdf_name(text: Text) -> bytes:
    """Escape text for use as a PDF name (the part after ``/``)."""
    out = bytearray()
    for b in _as_bytes(text):
        if b < 33 or b > 126 or b == _HASH:
            out += b"#%02x" % b  # hex code
        else:
            out.append(b)
    return bytes(out)
