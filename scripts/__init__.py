"""
Operational scripts
"""
