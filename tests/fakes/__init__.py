"""Test fakes for exercising the metadata layer.

Example:
    from tests.fakes import Article

    article = Article()
    article.title = "Hello"
"""

from .documents import Article, Profile

__all__ = ["Article", "Profile"]
