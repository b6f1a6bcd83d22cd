"""
Reusable building blocks for common resource shapes.
"""
