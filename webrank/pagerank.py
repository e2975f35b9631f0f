"""
PageRank computation for webpage ranking.

The solver iterates rank propagation over the corpus link graph until every
page settles within epsilon or the iteration limit runs out. A NetworkX
implementation is provided as a reference for cross-checking.
"""

import pandas as pd
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from webrank.graph import build_link_graph, build_networkx_graph
from webrank.models import Page
from webrank.searcher import top_k_sort


@dataclass
class PageRankResult:
    """Result of PageRank computation."""
    scores: pd.DataFrame  # DataFrame with uri and pagerank columns
    iterations: Optional[int] = None
    converged: bool = True
    convergence_history: List[float] = field(default_factory=list)  # L1 change per iteration


class PageRankAnalyzer:
    """
    Computes the PageRank of every page in a fixed corpus.

    All work happens in the constructor; afterwards the analyzer is a
    read-only rank table. The link graph is not kept once ranks are computed.
    """

    def __init__(
        self,
        pages: Iterable[Page],
        decay: float,
        epsilon: float,
        limit: int,
        verbose: bool = False
    ):
        """
        Build the link graph and compute page ranks.

        Args:
            pages: Pages in the corpus (URIs must be unique)
            decay: Share of rank that follows outbound links, in [0, 1]
            epsilon: Per-page change at or below which a page counts as settled
            limit: Maximum number of iterations; reaching it is not an error
            verbose: If True, print progress information

        Raises:
            ValueError: If the corpus is empty or a parameter is out of range
        """
        pages = list(pages)
        if not pages:
            raise ValueError("Cannot compute PageRank of an empty corpus")
        if not 0.0 <= decay <= 1.0:
            raise ValueError(f"decay must be in [0, 1], got {decay}")
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        self.decay = decay
        self.epsilon = epsilon
        self.limit = limit

        graph = build_link_graph(pages)
        if verbose:
            edge_count = sum(len(targets) for targets in graph.values())
            print(f"Built link graph: {len(graph)} pages, {edge_count} links")

        self._page_ranks, self._history, self._converged = self._make_page_ranks(graph)

        if verbose:
            state = "Converged" if self._converged else "Stopped at iteration limit"
            print(f"{state} after {len(self._history)} iterations")

    def _make_page_ranks(
        self,
        graph: Dict[str, Set[str]]
    ) -> Tuple[Dict[str, float], List[float], bool]:
        """
        Iterate rank propagation over the graph.

        Two buffers are kept: every iteration reads only `old` and writes only
        `new`, then the two are swapped.

        Returns:
            Tuple of (rank table, L1 change per iteration, converged flag)
        """
        n = len(graph)
        decay = self.decay
        jump = (1.0 - decay) / n

        old: Dict[str, float] = {uri: 1.0 / n for uri in graph}
        new: Dict[str, float] = {uri: 0.0 for uri in graph}
        history: List[float] = []
        converged = False

        for _ in range(self.limit):
            # Dangling pages spread their rank over every page
            dangling_share = 0.0
            for uri, links in graph.items():
                if links:
                    share = decay * old[uri] / len(links)
                    for link in links:
                        new[link] += share
                else:
                    dangling_share += decay * old[uri] / n

            changed = 0
            diff = 0.0
            for uri in new:
                new[uri] += dangling_share + jump
                delta = abs(new[uri] - old[uri])
                diff += delta
                if delta > self.epsilon:
                    changed += 1
            history.append(diff)

            old, new = new, old
            for uri in new:
                new[uri] = 0.0

            if changed == 0:
                converged = True
                break

        return old, history, converged

    def compute_page_rank(self, uri: str) -> float:
        """
        Return the page rank of the given URI.

        Precondition: uri was one of the page URIs given to the constructor.
        """
        return self._page_ranks[uri]

    score_of = compute_page_rank

    @property
    def page_ranks(self) -> Dict[str, float]:
        """Copy of the full rank table."""
        return dict(self._page_ranks)

    @property
    def iterations(self) -> int:
        return len(self._history)

    @property
    def converged(self) -> bool:
        return self._converged

    @property
    def result(self) -> PageRankResult:
        """Rank table as a PageRankResult, highest rank first."""
        scores_df = pd.DataFrame(
            list(self._page_ranks.items()), columns=['uri', 'pagerank']
        )
        scores_df = scores_df.sort_values(
            ['pagerank', 'uri'], ascending=[False, True]
        ).reset_index(drop=True)
        return PageRankResult(
            scores=scores_df,
            iterations=len(self._history),
            converged=self._converged,
            convergence_history=list(self._history),
        )

    def top_pages(self, k: int) -> List[Tuple[float, str]]:
        """
        Return the k highest-ranked pages as (rank, uri) pairs, best first.

        Raises:
            ValueError: If k is negative
        """
        ranked = top_k_sort(k, ((rank, uri) for uri, rank in self._page_ranks.items()))
        ranked.reverse()
        return ranked


def run_pagerank_networkx(
    pages: Iterable[Page],
    decay: float = 0.85,
    max_iter: int = 100,
    tol: float = 1e-10
) -> PageRankResult:
    """
    Compute PageRank using NetworkX over the same self-contained link graph.

    Args:
        pages: Pages in the corpus
        decay: Damping factor (default 0.85)
        max_iter: Maximum iterations
        tol: Convergence tolerance passed to NetworkX

    Returns:
        PageRankResult with scores
    """
    import networkx as nx

    pages = list(pages)
    if not pages:
        raise ValueError("Cannot compute PageRank of an empty corpus")

    G = build_networkx_graph(build_link_graph(pages))
    pr_scores = nx.pagerank(G, alpha=decay, max_iter=max_iter, tol=tol)

    scores_df = pd.DataFrame([
        {'uri': k, 'pagerank': v} for k, v in pr_scores.items()
    ])
    scores_df = scores_df.sort_values(
        ['pagerank', 'uri'], ascending=[False, True]
    ).reset_index(drop=True)

    return PageRankResult(scores=scores_df)
