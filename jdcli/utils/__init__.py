"""
Utility helpers shared by the storage, API and CLI layers.
"""
