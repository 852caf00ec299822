"""Mirror article client: finds a post's Arweave transaction by digest and reads its content."""
import logging
from typing import Any

import httpx

from onchain_summer.config import Settings, settings as default_settings
from onchain_summer.core.constants import MIRROR_APP_NAME, MIRROR_DIGEST_TAG
from onchain_summer.services.articles.types import Article, ArweaveEdge, ArweaveNode, MirrorEntry

logger = logging.getLogger(__name__)

MIRROR_TRANSACTIONS_QUERY = """
query GetMirrorTransactions($digest: String!) {
  transactions(
    tags: [
      { name: "App-Name", values: ["%s"] }
      { name: "%s", values: [$digest] }
    ]
    sort: HEIGHT_DESC
    first: 1
  ) {
    edges {
      node {
        id
      }
    }
  }
}
""" % (MIRROR_APP_NAME, MIRROR_DIGEST_TAG)


class ArticleClient:
    """Best-effort article fetch. Every failure comes back as None, never as an exception."""

    def __init__(self, config: Settings | None = None, *, transport: httpx.BaseTransport | None = None) -> None:
        self._config = config or default_settings
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self._config.article_timeout_seconds, transport=self._transport)

    def find_transaction_id(self, digest: str) -> str | None:
        """Newest Arweave transaction id tagged with this Mirror digest, or None."""
        payload = {"query": MIRROR_TRANSACTIONS_QUERY, "variables": {"digest": digest}}
        with self._client() as c:
            r = c.post(self._config.arweave_graphql_url, json=payload)
        r.raise_for_status()
        data: Any = r.json()
        for key in ("data", "transactions"):
            data = data.get(key) if isinstance(data, dict) else None
        edges: Any = data.get("edges") if isinstance(data, dict) else None
        if not isinstance(edges, list) or not edges:
            return None
        edge: ArweaveEdge = edges[0] if isinstance(edges[0], dict) else {}
        node: ArweaveNode = edge.get("node") if isinstance(edge.get("node"), dict) else {}
        transaction_id = node.get("id")
        return transaction_id if isinstance(transaction_id, str) and transaction_id else None

    def fetch_entry(self, transaction_id: str) -> Article | None:
        with self._client() as c:
            r = c.get(f"{self._config.arweave_gateway_url}/{transaction_id}")
        r.raise_for_status()
        entry: MirrorEntry = r.json()
        content = entry.get("content") if isinstance(entry, dict) else None
        if not isinstance(content, dict):
            logger.warning("Arweave entry %s has no content object", transaction_id)
            return None
        title, body = content.get("title"), content.get("body")
        if not isinstance(title, str) or not isinstance(body, str):
            logger.warning("Arweave entry %s has no content title/body", transaction_id)
            return None
        return Article(title=title, body=body)

    def fetch_article(self, digest: str) -> Article | None:
        """Article for a partner's content digest; None when missing or on any fetch error."""
        if not digest:
            return None
        try:
            transaction_id = self.find_transaction_id(digest)
            if not transaction_id:
                logger.info("No Mirror transaction for digest %s", digest)
                return None
            return self.fetch_entry(transaction_id)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers invalid JSON; bad shapes are handled above as None
            logger.warning("Article fetch failed for digest %s: %s", digest, e)
            return None
