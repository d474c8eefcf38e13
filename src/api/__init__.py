"""
ESG risk report API.
"""
