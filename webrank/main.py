"""
Command-line entry point: rank a page corpus against a query.

    python -m webrank.main corpus.jsonl --query "graph algorithms" --top-k 5
"""

import argparse
from pathlib import Path
from typing import List, Optional

from webrank.config import DECAY, EPSILON, ITERATION_LIMIT, PAGERANK_WEIGHT, TOP_K
from webrank.data_loader import load_pages
from webrank.pagerank import PageRankAnalyzer
from webrank.searcher import DocumentSearcher, tokenize_query
from webrank.tfidf import TfIdfAnalyzer


def plot_convergence(convergence_history: List[float], save_path: str, epsilon: float) -> None:
    """
    Plot PageRank convergence and save to file.

    Args:
        convergence_history: List of L1 differences per iteration
        save_path: Path to save the plot image
        epsilon: Per-page convergence threshold, drawn for reference
    """
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    plt.figure(figsize=(10, 6))

    iterations = list(range(1, len(convergence_history) + 1))

    plt.plot(iterations, convergence_history, 'b-', linewidth=2, marker='o', markersize=3)
    plt.xlabel('Iteration', fontsize=12)
    plt.ylabel('Difference from Previous Iteration', fontsize=12)
    plt.title('PageRank Convergence', fontsize=14)
    plt.yscale('log')
    plt.grid(True, alpha=0.3)

    plt.axhline(y=epsilon, color='r', linestyle='--', label=f'Epsilon ({epsilon:g})')
    plt.legend()

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    plt.close()

    print(f"Convergence plot saved to: {save_path}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rank webpages by TF-IDF relevance and PageRank.")
    p.add_argument("corpus", help="Path to a JSON or JSON-lines page corpus")
    p.add_argument("--query", required=True, help="Search query")
    p.add_argument("--top-k", type=int, default=TOP_K, help="Number of results (default: %(default)s)")
    p.add_argument("--decay", type=float, default=DECAY, help="PageRank decay factor (default: %(default)s)")
    p.add_argument("--epsilon", type=float, default=EPSILON, help="PageRank convergence threshold (default: %(default)s)")
    p.add_argument("--limit", type=int, default=ITERATION_LIMIT, help="PageRank iteration limit (default: %(default)s)")
    p.add_argument("--pagerank-weight", type=float, default=PAGERANK_WEIGHT,
                   help="Weight of PageRank in the combined score (default: %(default)s)")
    p.add_argument("--plot-convergence", default="", help="Optional: save a convergence plot to this path")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    if args.top_k < 0:
        raise SystemExit(f"--top-k must be non-negative, got {args.top_k}")
    if not 0.0 <= args.decay <= 1.0:
        raise SystemExit(f"--decay must be in [0, 1], got {args.decay}")
    if args.epsilon < 0:
        raise SystemExit(f"--epsilon must be non-negative, got {args.epsilon}")
    if args.limit < 0:
        raise SystemExit(f"--limit must be non-negative, got {args.limit}")

    pages = load_pages(args.corpus, verbose=True)
    if not pages:
        raise SystemExit("Corpus is empty.")

    print("-" * 60)
    print("Running PageRank...")
    pagerank = PageRankAnalyzer(pages, args.decay, args.epsilon, args.limit, verbose=True)

    if args.plot_convergence:
        Path(args.plot_convergence).parent.mkdir(parents=True, exist_ok=True)
        plot_convergence(pagerank.result.convergence_history, args.plot_convergence, args.epsilon)

    print("-" * 60)
    print("Building TF-IDF index...")
    tfidf = TfIdfAnalyzer(pages, verbose=True)

    query_words = tokenize_query(args.query)
    if not query_words:
        raise SystemExit("Query has no searchable words.")

    searcher = DocumentSearcher(tfidf, pagerank, pagerank_weight=args.pagerank_weight)
    results = searcher.search(query_words, top_k=args.top_k)

    print("-" * 60)
    if len(results) == 0:
        print("No matching pages.")
        return
    print(results.to_string(index=False))


if __name__ == "__main__":
    main()
