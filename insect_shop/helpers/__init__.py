"""
Helpers package
"""
