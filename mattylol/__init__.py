"""Serverless API proxies for matty.lol."""

__version__ = "0.1.0"
