"""
Data records shared by the webrank analyzers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

import pandas as pd


@dataclass(frozen=True)
class Page:
    """A crawled webpage: its URI, outbound links, and tokenized words."""
    uri: str
    links: Tuple[str, ...] = field(default_factory=tuple)
    words: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.uri:
            raise ValueError("Page uri must be a non-empty string")
        # Freeze list inputs so a page cannot change during a run
        object.__setattr__(self, 'links', tuple(self.links))
        object.__setattr__(self, 'words', tuple(self.words))

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Page":
        """
        Build a page from a mapping with 'uri', 'links' and 'words' keys.

        Missing or null 'links'/'words' are treated as empty.

        Raises:
            ValueError: If the record has no 'uri'
        """
        uri = record.get('uri')
        if uri is None or (pd.api.types.is_scalar(uri) and pd.isna(uri)):
            raise ValueError(f"Page record is missing 'uri': {record!r}")
        return cls(
            uri=str(uri),
            links=tuple(_as_sequence(record.get('links'))),
            words=tuple(_as_sequence(record.get('words'))),
        )


def _as_sequence(value: Any) -> Iterable[str]:
    if value is None:
        return ()
    if isinstance(value, str):
        raise ValueError(f"Expected a list of strings, got a string: {value!r}")
    return [str(v) for v in value]
