"""
Configuration file for Student Management System
Central configuration for catalog, prompts and logging
"""

from pathlib import Path

# ===========================
# PATH CONFIGURATION
# ===========================
BASE_DIR = Path(__file__).parent
LOGS_DIR = BASE_DIR / "logs"

# Create directories if they don't exist
LOGS_DIR.mkdir(exist_ok=True)

# ===========================
# SYSTEM CONFIGURATION
# ===========================
SYSTEM_NAME = "Student Management System"
VERSION = "1.0.0"

WELCOME_MESSAGE = f"Welcome to {SYSTEM_NAME}!"
EXIT_MESSAGE = "Exiting..."

# ===========================
# COURSE CATALOG
# ===========================
# Course name -> minimum fee. Order is the order shown to the user.
COURSE_FEES = {
    "Web development": 2000,
    "Blockchain": 5000,
    "App development": 7000,
    "AI": 8000,
}

# ===========================
# LOGGING CONFIGURATION
# ===========================
LOG_LEVEL = "INFO"  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
LOG_TO_FILE = True
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Log file paths
ROSTER_LOG = LOGS_DIR / "roster.log"
REGISTRATION_LOG = LOGS_DIR / "registration.log"
SYSTEM_LOG = LOGS_DIR / "system.log"
