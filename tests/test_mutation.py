from conftest import child_ids, make_todo

from nestodo.domain.todo import (
    Priority,
    delete_todo,
    find_todo,
    is_reconciled,
    reorder_within_parent,
    update_todos,
)


def rename(title):
    return lambda todo: todo.model_copy(update={"title": title})


class TestUpdateTodos:
    def test_missing_id_returns_same_forest(self):
        forest = (make_todo("a"), make_todo("b", children=[make_todo("c")]))
        result, changed = update_todos(forest, "missing-id", rename("x"))
        assert changed is False
        assert result is forest

    def test_updates_nested_node_and_shares_siblings(self):
        sibling = make_todo("s", children=[make_todo("s1")])
        forest = (make_todo("p", children=[make_todo("c", children=[make_todo("g")])]), sibling)
        result, changed = update_todos(forest, "g", rename("Grandchild"))
        assert changed is True
        assert find_todo(result, "g").title == "Grandchild"
        assert result[1] is sibling
        assert find_todo(forest, "g").title == "todo-g"

    def test_completing_last_child_completes_ancestors(self):
        forest = (
            make_todo(
                "root",
                children=[
                    make_todo("mid", children=[make_todo("leaf")]),
                    make_todo("done", completed=True),
                ],
            ),
        )
        result, changed = update_todos(
            forest, "leaf", lambda t: t.model_copy(update={"completed": True})
        )
        assert changed
        assert result[0].completed is True
        assert result[0].children[0].completed is True
        assert is_reconciled(result)

    def test_updater_replacing_children_is_reconciled(self):
        forest = (make_todo("p", completed=True),)
        result, _ = update_todos(
            forest,
            "p",
            lambda t: t.model_copy(update={"children": [make_todo("new")]}),
        )
        assert result[0].completed is False
        assert isinstance(result[0].children, tuple)

    def test_replacement_subtrees_are_reconciled_throughout(self):
        forest = (make_todo("r", children=[make_todo("p")]),)
        grafted = make_todo("c", children=[make_todo("g", completed=True)])
        result, changed = update_todos(
            forest,
            "p",
            lambda t: t.model_copy(update={"children": [grafted]}),
        )
        assert changed
        assert is_reconciled(result)
        p = result[0].children[0]
        assert p.children[0].completed is True
        assert p.completed is True
        assert result[0].completed is True

    def test_priority_change(self):
        forest = (make_todo("a"),)
        result, changed = update_todos(
            forest, "a", lambda t: t.model_copy(update={"priority": Priority.HIGH})
        )
        assert changed
        assert result[0].priority is Priority.HIGH

    def test_only_first_depth_first_match_is_updated(self):
        # Corrupt input with a duplicated id: the nested one comes first in pre-order.
        forest = (
            make_todo("p", children=[make_todo("dup", "nested")]),
            make_todo("dup", "root"),
        )
        result, changed = update_todos(forest, "dup", rename("changed"))
        assert changed
        assert result[0].children[0].title == "changed"
        assert result[1].title == "root"


class TestDeleteTodo:
    def test_missing_id_returns_same_forest(self):
        forest = (make_todo("a"),)
        result, changed = delete_todo(forest, "nope")
        assert changed is False
        assert result is forest

    def test_delete_root(self):
        forest = (make_todo("a"), make_todo("b"))
        result, changed = delete_todo(forest, "a")
        assert changed
        assert [t.id for t in result] == ["b"]

    def test_delete_removes_subtree(self):
        forest = (make_todo("p", children=[make_todo("c", children=[make_todo("g")])]),)
        result, _ = delete_todo(forest, "c")
        assert result[0].children == ()
        assert find_todo(result, "g") is None

    def test_deleting_last_active_child_completes_parent(self):
        forest = (
            make_todo(
                "root",
                children=[
                    make_todo("p", children=[make_todo("a", completed=True), make_todo("b")])
                ],
            ),
        )
        result, changed = delete_todo(forest, "b")
        assert changed
        assert result[0].children[0].completed is True
        assert result[0].completed is True


class TestReorderWithinParent:
    def forest(self):
        return (
            make_todo(
                "root",
                children=[
                    make_todo("p", children=[make_todo(x) for x in "abcd"]),
                ],
            ),
        )

    def parent(self, forest):
        return find_todo(forest, "p")

    def test_move_forward_lands_before_target(self):
        result, changed = reorder_within_parent(self.forest(), "p", "a", "c")
        assert changed
        assert child_ids(self.parent(result)) == ["b", "a", "c", "d"]

    def test_move_backward_takes_target_index(self):
        result, changed = reorder_within_parent(self.forest(), "p", "d", "b")
        assert changed
        assert child_ids(self.parent(result)) == ["a", "d", "b", "c"]

    def test_round_trip_restores_order(self):
        forest = self.forest()
        moved, _ = reorder_within_parent(forest, "p", "a", "c")
        restored, changed = reorder_within_parent(moved, "p", "a", "b")
        assert changed
        assert child_ids(self.parent(restored)) == ["a", "b", "c", "d"]

    def test_same_source_and_target_is_noop(self):
        forest = self.forest()
        result, changed = reorder_within_parent(forest, "p", "b", "b")
        assert changed is False
        assert result is forest

    def test_unknown_child_is_noop(self):
        forest = self.forest()
        result, changed = reorder_within_parent(forest, "p", "a", "zzz")
        assert changed is False
        assert result is forest

    def test_grandchild_is_not_a_direct_child(self):
        forest = self.forest()
        result, changed = reorder_within_parent(forest, "root", "a", "p")
        assert changed is False
        assert result is forest

    def test_unknown_parent_is_noop(self):
        forest = self.forest()
        result, changed = reorder_within_parent(forest, "nope", "a", "b")
        assert changed is False
        assert result is forest

    def test_move_onto_next_sibling_keeps_order(self):
        forest = self.forest()
        result, changed = reorder_within_parent(forest, "p", "a", "b")
        assert changed is False
        assert result is forest

    def test_root_level_parent(self):
        forest = (make_todo("p", children=[make_todo("x"), make_todo("y")]),)
        result, changed = reorder_within_parent(forest, "p", "y", "x")
        assert changed
        assert child_ids(result[0]) == ["y", "x"]
