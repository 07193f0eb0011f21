"""
IPFS content retrieval
"""
