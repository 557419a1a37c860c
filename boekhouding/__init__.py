"""Boekhouding: file-backed ledger and sheet storage behind a small JSON API."""

__version__ = "0.1.0"
