import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

APP_TITLE = os.getenv("APP_TITLE", "Badminton Doubles Scheduler")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
TEMPLATES_DIR = os.getenv("TEMPLATES_DIR", str(BASE_DIR / "badminton" / "templates"))

# Scheduling limits
ROUND_COUNT = 10
MIN_COURTS = 1
MAX_COURTS = 10
