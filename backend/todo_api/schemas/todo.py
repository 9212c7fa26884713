"""Todo Schemas - wire-visible transfer shape and request body validation.

Invariants:
    - TodoItemDTO carries exactly id, name, isComplete (secret never present)
    - TodoItemInput.name is required and not blank
    - Body `id` is accepted but ignored; the store-assigned id is authoritative
    - Unknown body fields (including `secret`) are dropped

Design Decisions:
    - snake_case attributes with camelCase aliases: FastAPI serializes
      response_model by alias, so the wire keeps `isComplete`
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_api.models.todo import Todo


class TodoItemInput(BaseModel):
    """POST/PUT body."""
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    name: str = Field(min_length=1)
    is_complete: bool = Field(False, alias="isComplete")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v


class TodoItemDTO(BaseModel):
    """Transfer shape of a Todo record."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str | None
    is_complete: bool = Field(alias="isComplete")

    @classmethod
    def from_record(cls, todo: Todo) -> "TodoItemDTO":
        return cls(id=todo.id, name=todo.name, is_complete=todo.is_complete)
