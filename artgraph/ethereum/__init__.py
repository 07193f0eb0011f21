"""
Ethereum support
"""
