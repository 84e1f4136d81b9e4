"""
PR Digest

Collects closed pull requests and their comments from a GitHub repository
and appends a markdown digest grouped by author.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
