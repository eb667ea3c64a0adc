"""
Global Configuration for Application
"""
import os

from dotenv import load_dotenv

# Pick up a local .env file when one is present
load_dotenv()

# MongoDB connection settings
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "carts")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

# Port the development server listens on
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Serve the Swagger UI at /apidocs/ when enabled
API_DOCS = os.getenv("API_DOCS", "false").lower() in ("1", "true", "yes")

# Keep Flask-RESTX from appending "did you mean" hints to 404 messages
RESTX_ERROR_404_HELP = False
