"""
Service layer for policies shared by repositories.

Validation and configuration live here so that repositories stay
focused on storage and the API layer stays focused on HTTP.
"""
