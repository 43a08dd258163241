"""
Template PDF validation ahead of a pdftk fill.
Catches the failures pdftk reports poorly (missing file, not a PDF, encrypted).
"""

import os
from dataclasses import dataclass, field
from io import BytesIO
from typing import List, Optional

from pypdf import PdfReader
from config import MAX_TEMPLATE_SIZE, ERROR_MESSAGES


@dataclass
class TemplateValidationResult:
    """Result of template validation."""
    success: bool
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    has_acroform: bool = False
    warnings: List[str] = field(default_factory=list)


def _failure(code: str) -> TemplateValidationResult:
    return TemplateValidationResult(
        success=False,
        error_code=code,
        error_message=ERROR_MESSAGES[code]
    )


def validate_template(template_path: str) -> TemplateValidationResult:
    """
    Validate a template PDF before filling it.

    Args:
        template_path: Path to the empty PDF form

    Returns:
        TemplateValidationResult with validation status and any errors/warnings
    """
    if not os.path.isfile(template_path):
        return _failure('missing_template')

    if os.path.getsize(template_path) > MAX_TEMPLATE_SIZE:
        return _failure('template_too_large')

    with open(template_path, 'rb') as f:
        file_bytes = f.read()

    # PDF format validation
    if not file_bytes.startswith(b'%PDF'):
        return _failure('not_pdf')

    try:
        reader = PdfReader(BytesIO(file_bytes))
        if getattr(reader, 'is_encrypted', False):
            return _failure('encrypted_pdf')
        root = reader.trailer["/Root"]
    except Exception:
        # If we can't read the PDF at all, it's probably corrupted
        return _failure('parse_failed')

    result = TemplateValidationResult(success=True)
    result.has_acroform = bool(root) and "/AcroForm" in root
    if not result.has_acroform:
        # pdftk still runs, the FDF just has nothing to land on
        result.warnings.append('Template has no /AcroForm; fields will not be filled')
    return result
