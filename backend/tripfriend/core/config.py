import os
import re

from dotenv import find_dotenv, load_dotenv


def _load_env_files() -> None:
    """
    Load the base .env, then the file named by ENV_FILE (e.g. .env.production).
    Existing OS environment variables are never overridden.
    """
    for name in (".env", os.environ.get("ENV_FILE")):
        if not name:
            continue
        path = name if os.path.isabs(name) else find_dotenv(name, usecwd=True)
        if path:
            load_dotenv(path, override=False)


_load_env_files()


def _get_int_env(var_name: str, default_value: int) -> int:
    """
    Parse an integer environment variable robustly.
    - Trims whitespace and trailing semicolons.
    - Falls back to the first integer found in the string.
    - Returns the provided default if parsing fails.
    """
    raw = os.environ.get(var_name, str(default_value))
    text = str(raw).strip().rstrip(";")
    try:
        return int(text)
    except ValueError:
        match = re.search(r"[-+]?\d+", text or "")
        if match:
            return int(match.group(0))
    return int(default_value)


def _get_cors_origins() -> list[str]:
    """
    Return CORS origins from env or a permissive default.
    Example env format:
      CORS_ORIGINS="http://localhost:3000,https://tripfriend.example.com"
    """
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


# === Environment Configuration ===
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")  # development, staging, production

# === Server Configuration ===
SERVER_HOST = os.environ.get("SERVER_HOST", "0.0.0.0")
SERVER_PORT = _get_int_env("SERVER_PORT", 8080)
DEBUG = os.environ.get("DEBUG", "true").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# === CORS Configuration ===
CORS_ORIGINS = _get_cors_origins()

# === Database Configuration ===
MONGODB_URI = os.environ.get("MONGODB_URI")
DATABASE_NAME = os.environ.get("DATABASE_NAME", "tripfriend")

# === Google OAuth Configuration ===
GOOGLE_CLIENT_ID = os.environ.get("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.environ.get("GOOGLE_CLIENT_SECRET")
GOOGLE_REDIRECT_URI = os.environ.get("GOOGLE_REDIRECT_URI")
GOOGLE_TOKEN_URL = os.environ.get("GOOGLE_TOKEN_URL", "https://oauth2.googleapis.com/token")
# OpenID Connect userinfo returns the "sub" claim (the v2 endpoint returns "id")
GOOGLE_USERINFO_URL = os.environ.get(
    "GOOGLE_USERINFO_URL", "https://openidconnect.googleapis.com/v1/userinfo"
)
GOOGLE_SCOPES = ["openid", "email", "profile"]

# === JWT Configuration ===
JWT_SECRET = os.environ.get("JWT_SECRET", "your-secret-key-change-this-in-production")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS512")
JWT_EXPIRATION_HOURS = _get_int_env("JWT_EXPIRATION_HOURS", 24)

# === Application Settings ===
APP_NAME = os.environ.get("APP_NAME", "TripFriend API")
APP_VERSION = "1.0.0"
