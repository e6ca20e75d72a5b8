"""Komite Sekolah dues API."""

__version__ = "1.0.0"
