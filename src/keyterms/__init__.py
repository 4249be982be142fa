"""keyterms - extract IMPORTANT TERMS sections and bundle them into a ZIP."""

__version__ = "0.1.0"
