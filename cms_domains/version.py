"""
Application version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 while the API settles)
- MINOR: Incremented with each merged PR

Version is displayed on server startup and in GET / endpoint.
"""

__version__ = "0.1"
