"""
GitHub profile report.

Turns a GitHub profile URL into a one-page PDF summary of the account and its
repositories.
"""

__version__ = "1.0.0"
