#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the daybook project.

    APP_DIR/           # Per-user application directory (click.get_app_dir)
    └── logs/          # Application logs
        ├── operations/
        └── errors/

Input exports and the output content tree are always given on the command
line, so no data paths are defined here. Nothing is created at import
time; the logger creates directories on first use.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third party ---
import click


APP_NAME = "daybook"

# ----- Application directory -----
APP_DIR: Path = Path(click.get_app_dir(APP_NAME))

# ---- Logs ----
LOG_DIR = APP_DIR / "logs"
