"""
Service layer.

``todo_store.TodoStore`` holds all application state.  One instance is
created per application by ``create_app`` and attached to
``app.state``; route handlers reach it through a dependency.
"""
