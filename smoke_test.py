import logging
import sys
from pathlib import Path

from config import LOG_FORMAT
from fdf_form import forge_fdf, PdftkFiller, PDFFormFillError

BASE = Path(__file__).parent
EXAMPLE_DIR = BASE / "Example PDFs"
CANDIDATES = [
    "form.pdf",
    "OoPdfFormExample.pdf",
]

SAMPLE_STRINGS = {
    "name": "Jane Doe (test)",
    "address.street": "12 Main St",
    "address.city": "Zürich",
}
SAMPLE_NAMES = {"subscribe": "Yes"}


def main():
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    fdf = forge_fdf("", SAMPLE_STRINGS, SAMPLE_NAMES, [], ["name"])
    fdf_out = BASE / "_smoke_output.fdf"
    fdf_out.write_bytes(fdf)
    print(f"FDF written to {fdf_out} size={len(fdf)} bytes")

    found = None
    for name in CANDIDATES:
        p = EXAMPLE_DIR / name
        if p.exists():
            found = p
            break
    if not found:
        print("NO_PDF_FOUND (FDF only)", flush=True)
        return 0

    try:
        filler = PdftkFiller()
        filled = filler.make_pdf(SAMPLE_STRINGS, SAMPLE_NAMES, [], ["name"], str(found))
    except PDFFormFillError as e:
        print(f"FILL_ERROR:{e}")
        return 3
    out_path = BASE / "_smoke_output_filled.pdf"
    out_path.write_bytes(filled)
    print(f"Filled PDF written to {out_path}")
    if not filled.startswith(b"%PDF"):
        print("FILL_WARN: output does not look like a PDF")
    print("SMOKE_OK")
    return 0

if __name__ == "__main__":
    sys.exit(main())
