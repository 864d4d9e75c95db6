# ABOUTME: BookBank - find books in the Rakuten catalog and reconcile them with your shelf.
# ABOUTME: Holds the package version used by the CLI and the HTTP User-Agent.

__version__ = "0.1.0"
