"""
Output services for Console Snake (terminal rendering).
"""
