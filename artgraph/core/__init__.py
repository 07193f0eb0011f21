"""
Core building blocks shared across the project
"""
