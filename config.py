"""
Configuration file for the Student Enrollment System
Central configuration for pricing, storage and console parameters
"""

import os
from decimal import Decimal
from pathlib import Path

# ===========================
# PATH CONFIGURATION
# ===========================
BASE_DIR = Path(__file__).parent

# Credentials, assessments and the error log live in the working directory
# unless ENROLLMENT_DATA_DIR points elsewhere
DATA_DIR = Path(os.environ.get("ENROLLMENT_DATA_DIR", ".")).expanduser()
CREDENTIALS_FILE = DATA_DIR / "users.txt"
ERROR_LOG = DATA_DIR / "error.log"

ASSESSMENT_PREFIX = "Assessment_"
ASSESSMENT_SUFFIX = ".txt"

# ===========================
# PRICING CONFIGURATION
# ===========================
CURRENCY = "PHP"
UNIT_RATE = Decimal("350.0")  # per academic unit
INSTALLMENT_FEE = Decimal("2000.0")  # flat surcharge for installment plans
MIN_DOWN_PERCENT = Decimal("0.20")  # 20% of total due
MIN_INSTALL_MONTHS = 2
MAX_INSTALL_MONTHS = 6

# ===========================
# ACCOUNT CONFIGURATION
# ===========================
PASSWORD_MIN_LENGTH = 6
ADMIN_PASSWORD = os.environ.get("ENROLLMENT_ADMIN_PASSWORD", "admin123")

# ===========================
# ENROLLMENT CONFIGURATION
# ===========================
MIN_YEAR_LEVEL = 1
MAX_YEAR_LEVEL = 4
GWA_MIN = Decimal("0")
GWA_MAX = Decimal("100")

# (program, specialization) pairs offered a midyear term.
# Specialization is None for programs without one.
MIDYEAR_ELIGIBLE = {
    ("BSIT", "WEB_MOBILE"),
    ("BSIT", "NETWORK_SYSTEMS"),
}

# ===========================
# LOGGING CONFIGURATION
# ===========================
LOG_LEVEL = "INFO"  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
LOG_TO_FILE = True
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ===========================
# DISPLAY CONFIGURATION
# ===========================
BANNER_WIDTH = 80
UNIVERSITY_NAME = "ISABELA STATE UNIVERSITY"
SYSTEM_TITLE = "ENROLLMENT SYSTEM"
SYSTEM_SUBTITLE = "CCSICT Student Enrollment"
MENU_TITLE = "ISABELA STATE UNIVERSITY - SACARIAS ENROLLMENT"
ASSESSMENT_TITLE = "SACARIAS - ASSESSMENT"

# ===========================
# SYSTEM CONFIGURATION
# ===========================
SYSTEM_NAME = "Student Enrollment System"
VERSION = "1.0.0"
