import json

from conftest import make_todo

from nestodo.application import BoardState, add_todo
from nestodo.domain.shared import Err, Ok
from nestodo.domain.todo import Priority
from nestodo.infrastructure.storage import BoardRepository, JsonStorage


class TestJsonStorage:
    def test_missing_file(self, tmp_path):
        result = JsonStorage().load_json(tmp_path / "missing.json")
        assert isinstance(result, Err)
        assert "File not found" in result.error

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = JsonStorage().load_json(path)
        assert isinstance(result, Err)
        assert "Invalid JSON" in result.error

    def test_round_trip_creates_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "data.json"
        assert isinstance(JsonStorage().save_json(path, [1, {"a": "b"}]), Ok)
        assert JsonStorage().load_json(path).value == [1, {"a": "b"}]
        assert [p.name for p in path.parent.iterdir()] == ["data.json"]

    def test_unserializable_data_keeps_previous_file(self, tmp_path):
        path = tmp_path / "data.json"
        JsonStorage().save_json(path, {"kept": True})
        result = JsonStorage().save_json(path, {"bad": object()})
        assert isinstance(result, Err)
        assert "not JSON serializable" in result.error
        assert JsonStorage().load_json(path).value == {"kept": True}


class TestBoardRepository:
    def test_missing_file_gives_empty_board(self, tmp_path):
        repo = BoardRepository(tmp_path / "todos.json", max_history=7)
        result = repo.load()
        assert isinstance(result, Ok)
        assert result.value.todos == ()
        assert result.value.max_history == 7
        assert not (tmp_path / "todos.json").exists()

    def test_save_writes_camel_case_document(self, tmp_path):
        path = tmp_path / "todos.json"
        state = BoardState(
            todos=(make_todo("p", "Parent", priority=Priority.HIGH, children=[make_todo("c")]),)
        )
        assert isinstance(BoardRepository(path).save(state), Ok)

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["history"] == []
        (root,) = document["todos"]
        assert root["id"] == "p"
        assert root["priority"] == "high"
        assert root["createdAt"] == "2024-01-01T00:00:00.000Z"
        assert root["children"][0]["id"] == "c"

    def test_save_and_load_keeps_history(self, tmp_path):
        repo = BoardRepository(tmp_path / "todos.json")
        state, _ = add_todo(BoardState(), "First").value
        state, _ = add_todo(state, "Second").value
        repo.save(state)

        loaded = repo.load().value
        assert loaded.todos == state.todos
        assert loaded.history == state.history
        assert [t.title for t in loaded.todos] == ["First", "Second"]

    def test_legacy_list_document_is_normalized_and_reconciled(self, tmp_path):
        path = tmp_path / "todos.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "p",
                        "title": "Parent",
                        "completed": False,
                        "children": [{"id": "c", "completed": True}],
                    },
                    "garbage",
                ]
            ),
            encoding="utf-8",
        )
        state = BoardRepository(path).load().value
        assert len(state.todos) == 2
        assert state.todos[0].completed is True
        assert state.todos[0].children[0].priority is Priority.MEDIUM
        assert state.history == ()

    def test_history_trimmed_to_limit(self, tmp_path):
        path = tmp_path / "todos.json"
        path.write_text(
            json.dumps({"todos": [], "history": [[], [], [], []]}),
            encoding="utf-8",
        )
        state = BoardRepository(path, max_history=2).load().value
        assert len(state.history) == 2

    def test_invalid_json_is_an_error(self, tmp_path):
        path = tmp_path / "todos.json"
        path.write_text("[{", encoding="utf-8")
        result = BoardRepository(path).load()
        assert isinstance(result, Err)
        assert "Invalid JSON" in result.error
