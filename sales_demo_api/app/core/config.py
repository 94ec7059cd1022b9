"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  The values
control the application metadata, the size and reproducibility of the
synthetic dataset and the address the server binds to when launched
through ``run.py``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _default_port() -> int:
    # ``PORT`` wins over ``MCP_PORT``; both are honoured for compatibility
    # with hosting platforms that inject one or the other.
    raw = os.getenv("PORT") or os.getenv("MCP_PORT") or "3333"
    return int(raw)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Sales Demo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file that receives a copy of the log output.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Number of synthetic sale records generated for each serving context.
    dataset_size: int = int(os.getenv("DATASET_SIZE", "100"))

    # Optional seed for the dataset generator.  Leave unset to get a
    # different dataset on every start; set it to reproduce one.
    dataset_seed: Optional[int] = _optional_int("DATASET_SEED")

    # When enabled every request gets its own freshly generated dataset
    # instead of sharing the one built at startup.
    dataset_per_request: bool = os.getenv("DATASET_PER_REQUEST", "false").lower() in {"1", "true", "yes"}

    # Locator of the dataset resource.  Search results point at
    # ``<resource_uri>#<record id>``.
    resource_uri: str = os.getenv("RESOURCE_URI", "mcp://ventas/records")

    # Disclaimer attached to every response envelope.
    data_note: str = os.getenv(
        "DATA_NOTE",
        "Records are randomly generated and do not represent real sales.",
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _default_port()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
