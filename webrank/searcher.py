"""
Result selection and combined ranking.

`top_k_sort` picks the largest elements of any comparable collection, and
`DocumentSearcher` uses it to rank documents by relevance plus PageRank.
"""

import re
import pandas as pd
from typing import Any, Iterable, List, Sequence

from webrank.config import PAGERANK_WEIGHT, STOP_WORDS, TOP_K
from webrank.heap import ArrayHeap


def top_k_sort(k: int, items: Iterable[Any]) -> List[Any]:
    """
    Return the k largest elements of items, sorted smallest to largest.

    If items holds k or fewer elements, all of them are returned sorted.
    The input is never modified.

    The heap is capped at k elements: an element only enters once the heap is
    full if it is larger than the current minimum, which keeps the work at
    O(n log k).

    Args:
        k: Number of elements to return
        items: Elements supporting `<`

    Returns:
        New list of at most k elements in ascending order

    Raises:
        ValueError: If k is negative or any element is None
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    elements = list(items)
    if any(item is None for item in elements):
        raise ValueError("top_k_sort does not accept None elements")

    if k == 0:
        return []

    heap = ArrayHeap()
    for item in elements:
        if heap.size() < k:
            heap.insert(item)
        elif heap.peek_min() < item:
            heap.remove_min()
            heap.insert(item)

    result = []
    while not heap.is_empty():
        result.append(heap.remove_min())
    return result


def tokenize_query(query: str) -> List[str]:
    """
    Tokenize and normalize a search query into words.

    Args:
        query: Search query string

    Returns:
        List of normalized words (lowercase, stop words removed)
    """
    words = re.findall(r'\b[a-zA-Z0-9]+\b', query.lower())
    return [w for w in words if w not in STOP_WORDS]


class DocumentSearcher:
    """
    Rank documents by TF-IDF relevance, boosted by PageRank.
    """

    def __init__(self, tfidf, pagerank=None, pagerank_weight: float = PAGERANK_WEIGHT):
        """
        Initialize the searcher.

        Args:
            tfidf: TfIdfAnalyzer built over the corpus
            pagerank: Optional PageRankAnalyzer built over the same corpus
            pagerank_weight: Multiplier applied to the PageRank score
        """
        self.tfidf = tfidf
        self.pagerank = pagerank
        self.pagerank_weight = pagerank_weight

    def search(self, query_words: Sequence[str], top_k: int = TOP_K) -> pd.DataFrame:
        """
        Score documents as relevance + pagerank_weight * pagerank.

        Only documents with non-zero relevance are considered.

        Args:
            query_words: Tokenized query
            top_k: Number of results to return

        Returns:
            DataFrame with 'uri', 'relevance', 'pagerank' and 'score' columns,
            best match first

        Raises:
            ValueError: If top_k is negative
        """
        if top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {top_k}")

        columns = ['uri', 'relevance', 'pagerank', 'score']
        candidates = self.tfidf.rank_documents(query_words, top_k=None)
        if len(candidates) == 0:
            return pd.DataFrame(columns=columns)

        # Equal scores go to the smaller uri, as in rank_documents
        uri_order = {uri: i for i, uri in enumerate(sorted(candidates['uri']))}

        scored = []
        for uri, relevance in zip(candidates['uri'], candidates['relevance']):
            rank = self.pagerank.compute_page_rank(uri) if self.pagerank is not None else 0.0
            score = relevance + self.pagerank_weight * rank
            scored.append((score, -uri_order[uri], uri, relevance, rank))

        best = top_k_sort(top_k, scored)
        best.reverse()

        return pd.DataFrame(
            [(uri, relevance, rank, score) for score, _, uri, relevance, rank in best],
            columns=columns,
        )
