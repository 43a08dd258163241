from __future__ import annotations
from typing import Any, AbstractSet

from .escape import escape_pdf_name, escape_pdf_string
from .schema import FIELD_NAME_DELIMITER, FieldBranch, FieldKind, FieldLeaf

CR = b"\x0d"


def _text(value: Any, kind: FieldKind) -> str:
    if value is None:
        return ""
    # Map booleans to standard on/off tokens recognized by most checkboxes
    if kind == "name" and isinstance(value, bool):
        return "Yes" if value else "Off"
    return str(value)


def forge_field_flags(full_name: str, hidden: AbstractSet[str], readonly: AbstractSet[str]) -> bytes:
    """Return the /F (annotation) and /Ff (field) flag operations for one field.

    Bit 2 of /F hides the widget; bit 1 of /Ff makes the field read-only. Flags are
    always written (set or clear) so the FDF overrides whatever the form has.
    """
    out = b"/SetF 2 " if full_name in hidden else b"/ClrF 2 "
    out += b"/SetFf 1 " if full_name in readonly else b"/ClrFf 1 "
    return out


def forge_fields(
    tree: FieldBranch,
    kind: FieldKind,
    hidden: AbstractSet[str],
    readonly: AbstractSet[str],
    accumulated_name: str = "",
) -> bytes:
    """Serialize every child of ``tree`` as an FDF field dictionary.

    Parents become ``/Kids`` arrays; leaves get a /V entry plus flags, looked up by the
    leaf's full dotted name (``accumulated_name`` + key).
    """
    if accumulated_name:
        accumulated_name += FIELD_NAME_DELIMITER

    parts = []
    for key, node in tree.items():
        parts.append(b"<< ")
        # partial field name is always a PDF string, never a PDF name
        parts.append(b"/T (" + escape_pdf_string(key) + b") ")

        if isinstance(node, FieldBranch):
            parts.append(b"/Kids [ ")
            parts.append(forge_fields(node, kind, hidden, readonly, accumulated_name + key))
            parts.append(b"] ")
        elif isinstance(node, FieldLeaf):
            value = _text(node.value, kind)
            if kind == "string":
                parts.append(b"/V (" + escape_pdf_string(value) + b") ")
            else:
                parts.append(b"/V /" + escape_pdf_name(value) + b" ")
            parts.append(forge_field_flags(accumulated_name + key, hidden, readonly))

        parts.append(b">> " + CR)
    return b"".join(parts)
