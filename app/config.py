import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL")

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Port for run_server.py
PORT = int(os.getenv("PORT", "5000"))

# Admin account seeded on first startup. No admin is created when the password is unset.
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_DEFAULT_PASSWORD = os.getenv("ADMIN_DEFAULT_PASSWORD")

# Password policy and hashing
PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# Password reset tokens are valid for one hour by default
RESET_TOKEN_TTL_MINUTES = int(os.getenv("RESET_TOKEN_TTL_MINUTES", "60"))
# Path of the admin page that accepts ?reset=<token>; printed with the reset token
ADMIN_RESET_PATH = os.getenv("ADMIN_RESET_PATH", "/admin")

# Admin sessions expire after this many hours (0 = only logout/next login ends a session)
ADMIN_SESSION_TTL_HOURS = float(os.getenv("ADMIN_SESSION_TTL_HOURS", "12"))

# CORS
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:5000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"

# Rate limiting is ENABLED by default; set RATE_LIMIT_ENABLED=false only for local testing
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"

# Honor X-Forwarded-For for client IPs only when the app runs behind a trusted reverse proxy
TRUST_PROXY_HEADERS = os.getenv("TRUST_PROXY_HEADERS", "false").lower() == "true"
