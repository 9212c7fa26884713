"""Run the Todo API with uvicorn: `python -m todo_api` or `todo-api`."""

import uvicorn

from todo_api.config import get_settings


def main() -> None:
    settings = get_settings()
    # workers stays at 1: the record store is process memory
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
