"""
API layer for the Travel Journal Backend.

Exposes the HTTP endpoints (accounts, profile, image upload/delete, travel
stories), the error handlers that render failures as
`{"error": true, "message": ...}`, and host middleware.
"""
