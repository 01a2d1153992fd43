"""
figtext test suite
"""
