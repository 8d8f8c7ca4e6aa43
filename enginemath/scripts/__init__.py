"""
Command line scripts distributed with enginemath.
"""
