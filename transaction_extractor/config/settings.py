"""Global settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Directories
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))

# Source document settings
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")
TESSERACT_PATH = os.getenv("TESSERACT_PATH", "")

# Receipt fields may override user-entered values only above this confidence
RECEIPT_TRUST_THRESHOLD = float(os.getenv("RECEIPT_TRUST_THRESHOLD", "0.7"))

# Optional YAML file replacing the built-in category keyword rules
CATEGORY_RULES_FILE = os.getenv("CATEGORY_RULES_FILE", "")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = LOGS_DIR / "extractor.log"
AUDIT_LOG_FILE = LOGS_DIR / "audit.log"

# Accepted source formats per document kind
PDF_SUFFIXES = {".pdf"}
TEXT_SUFFIXES = {".txt"}
IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".gif", ".webp"}

HISTORY_SUFFIXES = PDF_SUFFIXES | TEXT_SUFFIXES
RECEIPT_SUFFIXES = PDF_SUFFIXES | TEXT_SUFFIXES | IMAGE_SUFFIXES

# Currency settings
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€"
}
