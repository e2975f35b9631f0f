"""
Default parameters for webrank, read from the environment.

Values can be overridden with environment variables or a .env file.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# PageRank: share of rank that follows links each iteration
DECAY = float(os.getenv('WEBRANK_DECAY', '0.85'))

# PageRank: per-page change below which a page counts as settled
EPSILON = float(os.getenv('WEBRANK_EPSILON', '1e-4'))

# PageRank: hard cap on iterations
ITERATION_LIMIT = int(os.getenv('WEBRANK_ITERATION_LIMIT', '100'))

# Search: number of results returned
TOP_K = int(os.getenv('WEBRANK_TOP_K', '10'))

# Search: weight of the PageRank score in the combined score
PAGERANK_WEIGHT = float(os.getenv('WEBRANK_PAGERANK_WEIGHT', '1.0'))

STOP_WORDS = {
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to',
    'for', 'of', 'with', 'by', 'is', 'are', 'was', 'were'
}
