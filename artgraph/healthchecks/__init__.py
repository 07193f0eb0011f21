"""
Indexer health checks
"""
