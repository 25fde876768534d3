import os

from dotenv import load_dotenv

# Load environment variables only for local development
ENV_FILE_LOADED = os.path.exists(".env")
if ENV_FILE_LOADED:
    load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "String Analyzer Service")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
