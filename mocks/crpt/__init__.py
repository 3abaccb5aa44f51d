"""
Mock CRPT document API.
"""
