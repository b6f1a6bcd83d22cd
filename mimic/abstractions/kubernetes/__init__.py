"""
Kubernetes helpers shared by generation scripts.
"""
