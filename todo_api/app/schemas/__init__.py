"""
Pydantic schemas used by the API.

Only one resource exists: the todo record defined in ``todo.py``.
"""
