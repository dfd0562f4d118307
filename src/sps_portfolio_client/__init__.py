"""Portfolio service client library."""

from .client import PortfolioClient, comment_page_fetcher
from .exceptions import PortfolioClientError, PortfolioClientErrorCodes
from .http_client import HttpPortfolioClient
from .memory import InMemoryPortfolioClient, split_words
from .models import (
    AuthStatus,
    ClientConfig,
    Comment,
    CommentPage,
    Marker,
    WordCount,
    top_word_counts,
)

__all__ = [
    "PortfolioClient",
    "HttpPortfolioClient",
    "InMemoryPortfolioClient",
    "AuthStatus",
    "ClientConfig",
    "Comment",
    "CommentPage",
    "Marker",
    "WordCount",
    "comment_page_fetcher",
    "split_words",
    "top_word_counts",
    "PortfolioClientError",
    "PortfolioClientErrorCodes",
]
