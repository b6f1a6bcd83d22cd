"""
Typed configuration models for the tools mimic generates config for.
"""
