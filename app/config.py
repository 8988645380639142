import os

ENV = os.getenv("ENV", "development")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Load the fixture snapshot into the store at startup
SEED_DATA = os.getenv("SEED_DATA", "true").lower() in ("1", "true", "yes")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

DEFAULT_ORIGINS = [
    "http://localhost:3000",     # dashboard dev server
    "http://127.0.0.1:3000",
    "http://localhost:5173",     # vite dev server
    "http://127.0.0.1:5173",
    "http://frontend:3000",      # Docker service name
]

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()
] or DEFAULT_ORIGINS
