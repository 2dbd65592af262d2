from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class LinkRecord:
    """Represent a short key to original URL mapping.

    Attributes:
        short_key (str):
            Random identifier used as the lookup handle in the short URL.
        original_url (str):
            The user-supplied URL the short key redirects to. Stored verbatim.

    Example:
        >>> record = LinkRecord(short_key='aZ3kT9', original_url='https://example.com')
        >>> record.to_document()
        {'short_key': 'aZ3kT9', 'original_url': 'https://example.com'}
    """

    # fmt: off
    short_key: str      # 6 characters from [a-zA-Z0-9]
    original_url: str   # Original long URL
    # fmt: on

    def to_document(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> 'LinkRecord':
        return cls(short_key=document['short_key'], original_url=document['original_url'])
