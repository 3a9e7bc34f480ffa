# app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barberia.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# --- CORS ---
# Only the local front-end is allowed to call the API from a browser
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:5173")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
