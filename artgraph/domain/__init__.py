"""
Domain model
"""
