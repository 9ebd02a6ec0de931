"""CORS configuration"""

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def parse_origins(origins_str: str) -> list[str]:
    """Split a comma separated ALLOWED_ORIGINS value"""
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def setup_cors(app: FastAPI) -> None:
    """Configure CORS middleware

    Reads ALLOWED_ORIGINS from the environment. Without it every origin is
    allowed, which suits local demos of the debate viewer.
    """
    origins = parse_origins(os.getenv("ALLOWED_ORIGINS", ""))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        # credentials cannot be combined with a wildcard origin
        allow_credentials=bool(origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
