import pytest

from nestodo.domain.todo import Priority, Todo

BASE_DATE = "2024-01-01T00:00:00.000Z"


def make_todo(todo_id, title=None, completed=False, priority=Priority.MEDIUM, children=()):
    return Todo(
        id=todo_id,
        title=title if title is not None else f"todo-{todo_id}",
        completed=completed,
        created_at=BASE_DATE,
        priority=priority,
        children=tuple(children),
    )


def child_ids(todo):
    return [child.id for child in todo.children]


@pytest.fixture
def batch_forest():
    # p1: a, b, c(g); second root p2 with its own child
    return (
        make_todo(
            "p1",
            "Parent",
            children=[
                make_todo("a"),
                make_todo("b"),
                make_todo("c", children=[make_todo("g")]),
            ],
        ),
        make_todo("p2", "Other", children=[make_todo("x")]),
    )
