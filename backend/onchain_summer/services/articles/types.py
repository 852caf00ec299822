"""
Typed definitions for Mirror articles stored on Arweave.

The GraphQL lookup returns data.transactions.edges[].node.id; the transaction body
at {gateway}/{id} is a JSON document with a "content" object. Gateways are not
trusted to follow these shapes, so the client checks each level before reading it.
"""
from dataclasses import dataclass
from typing import Any, TypedDict


class ArweaveNode(TypedDict, total=False):
    id: str


class ArweaveEdge(TypedDict, total=False):
    node: ArweaveNode


class MirrorContent(TypedDict, total=False):
    title: str
    body: str  # markdown
    timestamp: int


class MirrorEntry(TypedDict, total=False):
    """Arweave transaction body for a Mirror post (only fields we read)."""
    content: MirrorContent
    digest: str
    authorship: dict[str, Any]


@dataclass(frozen=True)
class Article:
    title: str
    body: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "body": self.body}
