"""
Core embedding domain: exceptions, resilience policy, document processing.
"""
