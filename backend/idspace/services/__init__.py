"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- items: Id space, selection and pagination services
"""
