"""
Command-line tools for Domain Assessor.
"""
