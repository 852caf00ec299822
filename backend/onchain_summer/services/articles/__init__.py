"""
Partner articles from the Mirror/Arweave content network.
Fetch is best-effort: a missing or failed article yields None and the page renders without it.
"""
from onchain_summer.services.articles.client import ArticleClient
from onchain_summer.services.articles.types import Article

__all__ = ["Article", "ArticleClient"]
