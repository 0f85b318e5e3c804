"""Command line interface for graph_access_token."""
