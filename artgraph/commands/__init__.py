"""
Commands that apply marketplace events to the entity store
"""
