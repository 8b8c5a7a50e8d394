"""
Generator services.
"""
