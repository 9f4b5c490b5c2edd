"""FeedHub: RSS feed provider management."""

__version__ = "0.1.0"
