"""Command-line interface for flat-schema."""
from __future__ import annotations
