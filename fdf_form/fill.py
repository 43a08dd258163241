from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional, Sequence
import logging
import os
import shutil
import subprocess
import tempfile
import time

from config import (
    PDFTK_BINARY_NAME, PDFTK_FALLBACK_LOCATIONS, PDFTK_TIMEOUT,
    FDF_TMP_DIR, FDF_TMP_PREFIX, FDF_TMP_SUFFIX, ERROR_MESSAGES,
)
from logging_utils import log_fill_call
from .forge import forge_fdf
from .template import validate_template

logger = logging.getLogger(__name__)


class PDFFormFillError(Exception):
    pass

class TemplateError(PDFFormFillError):
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code

class ExternalToolError(PDFFormFillError):
    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

class PdftkNotFoundError(ExternalToolError):
    pass

class FdfWriteError(PDFFormFillError):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


def find_pdftk(exec_path: str = "", locations: Sequence[str] = PDFTK_FALLBACK_LOCATIONS) -> str:
    """Resolve the pdftk executable once, for injection into fill_form / PdftkFiller.

    An explicit ``exec_path`` wins, then PATH, then the fallback directories in order.
    """
    if exec_path:
        if os.path.isfile(exec_path) and os.access(exec_path, os.X_OK):
            return exec_path
        raise PdftkNotFoundError(f"{ERROR_MESSAGES['pdftk_not_found']}: {exec_path}")

    found = shutil.which(PDFTK_BINARY_NAME)
    if found:
        return found

    for location in locations:
        candidate = os.path.join(location, PDFTK_BINARY_NAME)
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate

    raise PdftkNotFoundError(ERROR_MESSAGES['pdftk_not_found'])


def _write_temp_fdf(fdf: bytes, tmp_dir: Optional[str]) -> str:
    try:
        fd, fdf_path = tempfile.mkstemp(prefix=FDF_TMP_PREFIX, suffix=FDF_TMP_SUFFIX, dir=tmp_dir)
    except OSError as e:
        target = tmp_dir or tempfile.gettempdir()
        raise FdfWriteError(f"{ERROR_MESSAGES['fdf_write_failed']}: {target} ({e})", path=target) from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(fdf)
    except OSError as e:
        os.unlink(fdf_path)
        raise FdfWriteError(f"{ERROR_MESSAGES['fdf_write_failed']}: {fdf_path} ({e})", path=fdf_path) from e
    return fdf_path


def fill_form(
    exec_path: str,
    template_path: str,
    fdf: bytes,
    tmp_dir: Optional[str] = FDF_TMP_DIR,
    flatten: bool = True,
    timeout: float = PDFTK_TIMEOUT,
) -> bytes:
    """Run ``pdftk <template> fill_form <fdf> output - [flatten]`` and return the PDF bytes.

    The FDF goes through a temporary file that is removed whatever the outcome.
    """
    fdf_path = _write_temp_fdf(fdf, tmp_dir)
    logger.debug("Wrote FDF to %s (%d bytes)", fdf_path, len(fdf))

    cmd = [exec_path, template_path, "fill_form", fdf_path, "output", "-"]
    if flatten:
        cmd.append("flatten")

    try:
        try:
            proc = subprocess.run(cmd, capture_output=True, timeout=timeout)
        except OSError as e:
            raise ExternalToolError(f"Failed to start pdftk ({exec_path}): {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ExternalToolError(f"{ERROR_MESSAGES['pdftk_timeout']} after {timeout}s") from e
    finally:
        try:
            os.unlink(fdf_path)
        except FileNotFoundError:
            pass

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        logger.error("pdftk exited with %s for %s: %s", proc.returncode, template_path, stderr)
        raise ExternalToolError(
            f"{ERROR_MESSAGES['pdftk_failed']} (exit {proc.returncode}): {stderr}",
            returncode=proc.returncode,
            stderr=stderr,
        )

    logger.debug("pdftk fill_form%s => %d bytes", " + flatten" if flatten else "", len(proc.stdout))
    return proc.stdout


class PdftkFiller:
    """Fill PDF form templates with field data through pdftk.

    Usage:
        filler = PdftkFiller()  # or PdftkFiller(exec_path="/opt/pdftk/bin/pdftk")
        pdf_bytes = filler.make_pdf(
            {"name": "Jane Doe", "address.city": "Springfield"},
            {"subscribe": "Yes"},
            hidden=[],
            readonly=["name"],
            template_path="form.pdf",
        )

    Notes:
        * Text fields, combo boxes and list boxes go in ``strings``.
        * Checkboxes and radio buttons go in ``names``; the values are usually the
          (case sensitive) names "Yes" and "Off".
        * Anything listed in ``hidden`` or ``readonly`` is set; every other field has the
          flag cleared, even if the form sets it already.
    """

    def __init__(self, exec_path: str = "", tmp_dir: Optional[str] = FDF_TMP_DIR):
        self.exec_path = find_pdftk(exec_path)
        self.tmp_dir = tmp_dir

    def make_pdf(
        self,
        strings: Mapping[Any, Any],
        names: Mapping[Any, Any],
        hidden: Iterable[Any],
        readonly: Iterable[Any],
        template_path: str,
        output_path: Optional[str] = None,
        form_url: str = "",
        flatten: bool = True,
    ) -> bytes:
        started = time.time()
        hidden = list(hidden)
        readonly = list(readonly)
        counts = {
            "strings": len(strings),
            "names": len(names),
            "hidden": len(hidden),
            "readonly": len(readonly),
        }
        error = None
        try:
            validation = validate_template(template_path)
            if not validation.success:
                raise TemplateError(f"{validation.error_message}: {template_path}", validation.error_code)
            for warning in validation.warnings:
                logger.warning("%s (%s)", warning, template_path)

            fdf = forge_fdf(form_url, strings, names, hidden, readonly)
            pdf = fill_form(self.exec_path, template_path, fdf, tmp_dir=self.tmp_dir, flatten=flatten)

            if output_path:
                with open(output_path, "wb") as f:
                    f.write(pdf)
                logger.info("Filled PDF written to %s", output_path)
        except Exception as e:
            error = str(e) or type(e).__name__
            raise
        finally:
            log_fill_call(template_path, counts, started, error=error)
        return pdf
