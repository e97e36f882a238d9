"""
Pydantic schema definitions for API payloads.

Request bodies and the stored/returned user record are declared here,
separately from the service layer that manipulates them.
"""
