"""
Mock services used by integration tests and local development.
"""
