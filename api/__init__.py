"""
Jobly REST API
"""
