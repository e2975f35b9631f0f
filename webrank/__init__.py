"""
webrank - A Python package for ranking crawled webpages.

This package provides tools for:
- Loading page corpora from JSON files
- Building self-contained link graphs
- Computing PageRank for page authority
- Scoring query relevance with a TF-IDF vector space model
- Selecting the top-k results with a binary heap
"""

from webrank.models import Page
from webrank.heap import ArrayHeap
from webrank.searcher import DocumentSearcher, top_k_sort, tokenize_query
from webrank.graph import build_link_graph, build_edges_df, build_networkx_graph
from webrank.pagerank import PageRankAnalyzer, PageRankResult, run_pagerank_networkx
from webrank.tfidf import TfIdfAnalyzer, compute_cosine_similarity, compute_tf_scores
from webrank.data_loader import load_pages, pages_from_dataframe

__version__ = "0.1.0"

__all__ = [
    # Models
    "Page",
    # Selection
    "ArrayHeap",
    "top_k_sort",
    # Graph
    "build_link_graph",
    "build_edges_df",
    "build_networkx_graph",
    # PageRank
    "PageRankAnalyzer",
    "PageRankResult",
    "run_pagerank_networkx",
    # TF-IDF
    "TfIdfAnalyzer",
    "compute_cosine_similarity",
    "compute_tf_scores",
    # Search
    "DocumentSearcher",
    "tokenize_query",
    # Data loading
    "load_pages",
    "pages_from_dataframe",
]
