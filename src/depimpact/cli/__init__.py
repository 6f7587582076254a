"""
Command line interface for the dependency impact toolkit.
"""
