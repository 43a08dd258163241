"""FDF form data package.

Builds FDF (Forms Data Format) documents from flat, dot-delimited field mappings and
hands them to pdftk to fill and flatten a PDF form template.
"""
from .schema import FieldBranch, FieldLeaf, FieldKind
from .escape import escape_pdf_string, escape_pdf_name
from .burst import burst_dots
from .fields import forge_fields, forge_field_flags
from .forge import forge_fdf, FDF_HEADER, FDF_TRAILER
from .template import validate_template, TemplateValidationResult
from .fill import (
    fill_form,
    find_pdftk,
    PdftkFiller,
    PDFFormFillError,
    TemplateError,
    ExternalToolError,
    PdftkNotFoundError,
    FdfWriteError,
)

__all__ = [
    "FieldBranch",
    "FieldLeaf",
    "FieldKind",
    "escape_pdf_string",
    "escape_pdf_name",
    "burst_dots",
    "forge_fields",
    "forge_field_flags",
    "forge_fdf",
    "FDF_HEADER",
    "FDF_TRAILER",
    "validate_template",
    "TemplateValidationResult",
    "fill_form",
    "find_pdftk",
    "PdftkFiller",
    "PDFFormFillError",
    "TemplateError",
    "ExternalToolError",
    "PdftkNotFoundError",
    "FdfWriteError",
]
