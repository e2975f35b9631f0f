"""
Graph building utilities for webpage link networks.
"""

import pandas as pd
from typing import Dict, Iterable, List, Set

from webrank.models import Page


def corpus_uris(pages: Iterable[Page]) -> List[str]:
    """
    Collect page URIs in corpus order, rejecting duplicates.

    Args:
        pages: Pages in the corpus

    Returns:
        List of URIs

    Raises:
        ValueError: If two pages share a URI
    """
    uris: List[str] = []
    seen: Set[str] = set()
    for page in pages:
        if page.uri in seen:
            raise ValueError(f"Duplicate page uri in corpus: {page.uri}")
        seen.add(page.uri)
        uris.append(page.uri)
    return uris


def build_link_graph(pages: Iterable[Page]) -> Dict[str, Set[str]]:
    """
    Build an adjacency-set graph from a page corpus.

    Links whose target is not a page in the corpus are dropped, so the graph
    is self-contained. Every page gets an entry, even without links.

    Args:
        pages: Pages in the corpus

    Returns:
        Dictionary mapping page URI to the set of linked page URIs
    """
    pages = list(pages)
    valid_uris: Set[str] = set(corpus_uris(pages))

    graph: Dict[str, Set[str]] = {}
    for page in pages:
        graph[page.uri] = {link for link in page.links if link in valid_uris}
    return graph


def build_edges_df(graph: Dict[str, Set[str]]) -> pd.DataFrame:
    """
    Flatten a link graph into an edge list DataFrame.

    Args:
        graph: Dictionary mapping page URI to linked page URIs

    Returns:
        DataFrame with 'source' and 'target' columns, sorted for stable output
    """
    edges = [
        (src, dst)
        for src, targets in graph.items()
        for dst in targets
    ]

    edges_df = pd.DataFrame(edges, columns=['source', 'target'])
    return edges_df.sort_values(['source', 'target']).reset_index(drop=True)


def build_networkx_graph(graph: Dict[str, Set[str]]):
    """
    Build a NetworkX directed graph from a link graph.

    Pages without any links are kept as isolated nodes.

    Args:
        graph: Dictionary mapping page URI to linked page URIs

    Returns:
        NetworkX DiGraph
    """
    import networkx as nx

    G = nx.DiGraph()
    G.add_nodes_from(graph.keys())
    G.add_edges_from(build_edges_df(graph).itertuples(index=False, name=None))
    return G
