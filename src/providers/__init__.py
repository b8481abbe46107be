"""
Providers package for the calendar API.

Each provider module implements integration with a specific external service.
"""
