"""
Configuration
=============

Settings read from the environment.
"""

import os

SERVICE_NAME = "Hybrid Layouts"
SERVICE_VERSION = "1.0.0"

# Remote seat-layout service (used by SeatLayoutClient)
SEAT_LAYOUT_API_URL = os.getenv("SEAT_LAYOUT_API_URL", "http://localhost:8080/api")
SEAT_LAYOUT_API_TIMEOUT = float(os.getenv("SEAT_LAYOUT_API_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
