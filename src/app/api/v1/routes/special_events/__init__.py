"""
Special Events Routes

Event finance, financial model and risk endpoints.
"""
