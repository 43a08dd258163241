from __future__ import annotations
"""FDF document assembly.

PDF readers can be particular about CR and LF characters, so every line terminator
below is spelled out: CR == \\x0d, LF == \\x0a.
"""
from typing import Any, Iterable, Mapping, Optional

from .burst import burst_dots
from .escape import escape_pdf_string
from .fields import forge_fields

FDF_HEADER = b"%FDF-1.2\x0d%\xe2\xe3\xcf\xd3\x0d\x0a"
FDF_TRAILER = b"trailer\x0d<<\x0d/Root 1 0 R \x0d\x0d>>\x0d%%EOF\x0d\x0a"


def forge_fdf(
    form_url: Optional[str],
    strings: Mapping[Any, Any],
    names: Mapping[Any, Any],
    hidden: Iterable[Any] = (),
    readonly: Iterable[Any] = (),
) -> bytes:
    """Build a complete FDF document.

    Args:
        form_url: PDF form filename or URL written as /F; skipped when empty.
        strings: full field name -> value for text fields, combo boxes, list boxes.
        names: full field name -> value for checkboxes and radio buttons ("Yes"/"Off").
        hidden: full field names to hide.
        readonly: full field names to mark read-only.

    Returns:
        The FDF bytes, ready to be written to disk or handed to pdftk.
    """
    hidden_set = frozenset(str(n) for n in hidden)
    readonly_set = frozenset(str(n) for n in readonly)

    parts = [
        FDF_HEADER,
        b"1 0 obj\x0d<< ",  # open the Root dictionary
        b"\x0d/FDF << ",  # open the FDF dictionary
        b"/Fields [ ",  # open the form Fields array
        forge_fields(burst_dots(strings), "string", hidden_set, readonly_set),
        forge_fields(burst_dots(names), "name", hidden_set, readonly_set),
        b"] \x0d",  # close the Fields array
    ]

    if form_url:
        parts.append(b"/F (" + escape_pdf_string(form_url) + b") \x0d")

    parts.append(b">> \x0d")  # close the FDF dictionary
    parts.append(b">> \x0dendobj\x0d")  # close the Root dictionary
    # note the "1 0 R" reference to "1 0 obj" above
    parts.append(FDF_TRAILER)
    return b"".join(parts)
