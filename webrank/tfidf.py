"""
TF-IDF vector space model for query relevance.

Documents are weighted with relative term frequency times the absolute
natural-log inverse document frequency, and compared to queries by cosine
similarity.
"""

import math
import pandas as pd
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from webrank.graph import corpus_uris
from webrank.models import Page


def compute_cosine_similarity(vec1: Dict[str, float], vec2: Dict[str, float]) -> float:
    """
    Compute cosine similarity between two sparse vectors.

    Args:
        vec1: First vector as a dictionary {word: weight}
        vec2: Second vector as a dictionary {word: weight}

    Returns:
        Cosine similarity, or 0.0 if either vector has zero magnitude
    """
    if len(vec2) < len(vec1):
        vec1, vec2 = vec2, vec1
    return _cosine(vec1, vec2, norm(vec1), norm(vec2))


def _cosine(
    vec1: Dict[str, float],
    vec2: Dict[str, float],
    norm1: float,
    norm2: float
) -> float:
    """Cosine of two vectors with known norms, iterating over vec1 only."""
    dot_product = sum(weight * vec2.get(word, 0.0) for word, weight in vec1.items())

    denominator = norm1 * norm2
    if denominator == 0:
        return 0.0
    # Rounding can push an exact match a hair above 1
    return min(1.0, dot_product / denominator)


def norm(vector: Dict[str, float]) -> float:
    """Euclidean length of a sparse vector."""
    return math.sqrt(sum(weight * weight for weight in vector.values()))


def compute_tf_scores(words: Sequence[str]) -> Dict[str, float]:
    """
    Compute relative term frequency for each distinct word.

    TF(t, d) = count(t, d) / len(d)

    Args:
        words: Words of a single document or query, in order

    Returns:
        Dictionary mapping words to their TF scores (empty for no words)
    """
    if not words:
        return {}
    total = len(words)
    return {word: count / total for word, count in Counter(words).items()}


class TfIdfAnalyzer:
    """
    Precomputes IDF scores and per-document TF-IDF vectors for a corpus.

    Read-only after construction.
    """

    def __init__(self, pages: Iterable[Page], verbose: bool = False):
        pages = list(pages)
        corpus_uris(pages)

        self._idf_scores = self._compute_idf_scores(pages)
        self._document_vectors = self._compute_document_vectors(pages)
        # Norms of the stored document vectors, keyed by URI
        self._document_norms = {
            uri: norm(vector) for uri, vector in self._document_vectors.items()
        }

        if verbose:
            print(f"Indexed {len(pages)} documents, {len(self._idf_scores)} distinct words")

    @staticmethod
    def _compute_idf_scores(pages: List[Page]) -> Dict[str, float]:
        """
        Map every word in the corpus to its IDF score.

        IDF(t) = |ln(df(t) / N)|, where df(t) counts distinct documents
        containing t.
        """
        document_frequency: Counter = Counter()
        for page in pages:
            document_frequency.update(set(page.words))

        n = len(pages)
        return {
            word: abs(math.log(df / n))
            for word, df in document_frequency.items()
        }

    def _compute_document_vectors(self, pages: List[Page]) -> Dict[str, Dict[str, float]]:
        vectors = {}
        for page in pages:
            tf_scores = compute_tf_scores(page.words)
            vectors[page.uri] = {
                word: tf * self._idf_scores[word]
                for word, tf in tf_scores.items()
            }
        return vectors

    @property
    def idf_scores(self) -> Dict[str, float]:
        """Copy of the IDF table."""
        return dict(self._idf_scores)

    def get_document_tf_idf_vectors(self) -> Dict[str, Dict[str, float]]:
        """Copy of every document's TF-IDF vector, keyed by URI."""
        return {uri: dict(vector) for uri, vector in self._document_vectors.items()}

    def compute_query_vector(self, query_words: Sequence[str]) -> Dict[str, float]:
        """
        Weight query words with TF-IDF.

        Words that never occur in the corpus get weight 0.
        """
        return {
            word: tf * self._idf_scores.get(word, 0.0)
            for word, tf in compute_tf_scores(query_words).items()
        }

    def compute_relevance(self, query_words: Sequence[str], uri: str) -> float:
        """
        Cosine similarity between the query and the document at uri.

        Precondition: uri was one of the page URIs given to the constructor.

        Args:
            query_words: Tokenized query
            uri: Document URI

        Returns:
            Relevance in [0, 1]; 0.0 when the query or document has no weight
        """
        document_vector = self._document_vectors[uri]
        return self._relevance(self.compute_query_vector(query_words), uri, document_vector)

    relevance = compute_relevance

    def _relevance(
        self,
        query_vector: Dict[str, float],
        uri: str,
        document_vector: Dict[str, float]
    ) -> float:
        return _cosine(query_vector, document_vector, norm(query_vector), self._document_norms[uri])

    def rank_documents(self, query_words: Sequence[str], top_k: Optional[int] = 10) -> pd.DataFrame:
        """
        Score every document against the query.

        Args:
            query_words: Tokenized query
            top_k: Number of results to return (None for all)

        Returns:
            DataFrame with 'uri' and 'relevance' columns for documents with
            non-zero relevance, most relevant first

        Raises:
            ValueError: If top_k is negative
        """
        if top_k is not None and top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {top_k}")

        query_vector = self.compute_query_vector(query_words)

        results = []
        for uri, document_vector in self._document_vectors.items():
            score = self._relevance(query_vector, uri, document_vector)
            if score > 0:
                results.append({'uri': uri, 'relevance': score})

        results_df = pd.DataFrame(results, columns=['uri', 'relevance'])
        if len(results_df) == 0:
            return results_df

        results_df = results_df.sort_values(['relevance', 'uri'], ascending=[False, True])
        if top_k is not None:
            results_df = results_df.head(top_k)
        return results_df.reset_index(drop=True)
