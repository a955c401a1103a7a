"""
Version 1 of the API.

This subpackage bundles the todo endpoints.  Breaking changes should be
introduced in a new version subpackage to keep existing clients working.
"""
