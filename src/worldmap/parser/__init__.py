"""Snapshot parsing and data model."""

from worldmap.parser.snapshot import parse_snapshot

__all__ = ["parse_snapshot"]
