"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box with the demo seed data and simulated
latency enabled.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Loyalty Admin API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # When enabled every store operation sleeps for a fixed number of
    # milliseconds to emulate a remote backend (see ``services.crud_service.Latency``).
    # Set SIMULATE_LATENCY=false for benchmarks and tests.
    simulate_latency: bool = field(default_factory=lambda: _env_flag("SIMULATE_LATENCY", "true"))

    # Populate the store with the demo businesses, customers, etc. at
    # startup.  When disabled all sequences start empty.
    seed_data: bool = field(default_factory=lambda: _env_flag("SEED_DATA", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings`` instead.
settings = Settings()
