"""ORM Models - SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before
      create_all runs at startup
"""

from todo_api.models.todo import Todo  # noqa: F401
