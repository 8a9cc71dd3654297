"""
Configuration for transaction analytics.
"""
