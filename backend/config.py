"""Runtime settings read from the environment (see .env.example)"""
import os

GITHUB_TOKEN = os.getenv("GITHUB_TOKEN", "")
GITHUB_DAYS_BACK = int(os.getenv("GITHUB_DAYS_BACK", "60"))

# Seconds per outbound request. Applies to every collector.
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15"))
USER_AGENT = os.getenv("USER_AGENT", "SolanaNarrativeDetector/1.0")

DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.path.dirname(__file__), "data"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SENTRY_DSN = os.getenv("SENTRY_DSN", "")
ENVIRONMENT = os.getenv("ENVIRONMENT", "production")
