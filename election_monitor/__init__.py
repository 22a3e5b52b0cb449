"""Top-level package for the election monitor.

This package holds the polling station network: an undirected, weighted
graph of stations with shortest-path and radius queries, plus the
configuration, adapters and services wired around it.
"""
