"""Async client for the meeting service user-management API."""

__version__ = "0.1.0"
