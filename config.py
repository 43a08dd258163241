"""
Configuration settings for the FDF form filler.
Consolidates all constants and configuration in one place.
"""

# pdftk Location
PDFTK_BINARY_NAME = "pdftk"
# Searched in order when pdftk is not on PATH
PDFTK_FALLBACK_LOCATIONS = ["/usr/bin/", "/usr/local/bin/", "/bin/"]
PDFTK_TIMEOUT = 60  # seconds per fill_form invocation

# Temporary FDF Files
FDF_TMP_DIR = None  # None => system temp dir
FDF_TMP_PREFIX = "fdf"
FDF_TMP_SUFFIX = ".fdf"

# Template Limits
MAX_TEMPLATE_SIZE = 50 * 1024 * 1024  # 50MB

# Logging Configuration
LOG_FILE_FILLS = 'fill_calls.log'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Error Messages
ERROR_MESSAGES = {
    'missing_template': 'Template PDF does not exist',
    'template_too_large': 'Template PDF exceeds the size limit',
    'not_pdf': 'Template is not a PDF file',
    'encrypted_pdf': 'Encrypted PDF not supported',
    'parse_failed': 'Failed to parse template PDF',
    'pdftk_not_found': 'pdftk not found',
    'pdftk_failed': 'pdftk failed to fill the form',
    'pdftk_timeout': 'pdftk timed out',
    'fdf_write_failed': 'Unable to write temporary FDF file',
}
