"""
articlesum - article summarization worker.

Reduces article text to its most salient sentences, asks a generative
provider for a short and a long summary, extracts keywords and persists
the result against the article identifier.
"""

__version__ = "0.1.0"
