"""Crawler-aware preview pages for shared post links."""

__version__ = "0.1.0"
