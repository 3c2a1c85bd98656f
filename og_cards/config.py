# config.py

import os

# --- SHARED CONFIG ---
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
SERVICE_NAME = os.environ.get("SERVICE_NAME", "og-cards")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "json" if ENVIRONMENT == "production" else "console").lower()

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8787"))

OG_IMAGE_BASE_URL = os.environ.get("OG_IMAGE_BASE_URL", "https://vaan-og-images.keyvez.workers.dev")
