"""A WSGI service for listing, creating and updating bug bounties stored in SQL."""

__version__ = "0.1.0"