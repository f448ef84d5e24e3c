"""Building blocks for a Typst-based static site generator: paths, metadata, assets, dependencies and CLI parsing."""

__version__ = "0.6.5"