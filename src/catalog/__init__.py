"""Lending-library catalog manager.

This package contains the catalog domain (authors, genres, books and book
copies), its validation and integrity rules, the database layer and the
FastAPI application that serves the server-rendered forms.
"""

__version__ = "0.1.0"
