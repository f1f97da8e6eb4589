# main.py
"""
Entry point for Google Cloud Functions v2.
Imports and exports the handle_request function from src/main.py.
"""

from src.main import handle_request

__all__ = ["handle_request"]
