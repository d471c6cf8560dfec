"""
Pydantic schemas for request, response and record validation.
"""
