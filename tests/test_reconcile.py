from conftest import make_todo

from nestodo.domain.todo import (
    is_reconciled,
    reconcile_completion,
    reconcile_tree,
    set_completion_deep,
    toggle_completion,
    update_todos,
)


class TestReconcileCompletion:
    def test_leaf_is_returned_unchanged(self):
        leaf = make_todo("a", completed=True)
        assert reconcile_completion(leaf) is leaf

    def test_parent_completed_when_all_children_done(self):
        parent = make_todo("p", children=[make_todo("a", completed=True)])
        fixed = reconcile_completion(parent)
        assert fixed.completed is True
        assert fixed.children is parent.children

    def test_parent_reopened_when_a_child_is_active(self):
        parent = make_todo(
            "p",
            completed=True,
            children=[make_todo("a", completed=True), make_todo("b")],
        )
        assert reconcile_completion(parent).completed is False

    def test_consistent_parent_is_same_object(self):
        parent = make_todo("p", children=[make_todo("a")])
        assert reconcile_completion(parent) is parent


class TestReconcileTree:
    def test_grandchild_change_reaches_root(self):
        forest = (
            make_todo(
                "root",
                completed=True,
                children=[make_todo("mid", completed=True, children=[make_todo("leaf")])],
            ),
        )
        fixed = reconcile_tree(forest)
        assert fixed[0].completed is False
        assert fixed[0].children[0].completed is False
        assert is_reconciled(fixed)

    def test_completes_up_the_chain(self):
        forest = (
            make_todo(
                "root",
                children=[make_todo("mid", children=[make_todo("leaf", completed=True)])],
            ),
        )
        fixed = reconcile_tree(forest)
        assert fixed[0].completed is True
        assert fixed[0].children[0].completed is True

    def test_idempotent(self):
        forest = (
            make_todo("p", completed=True, children=[make_todo("a"), make_todo("b", completed=True)]),
            make_todo("q", children=[make_todo("c", completed=True)]),
        )
        once = reconcile_tree(forest)
        assert reconcile_tree(once) == once
        assert reconcile_tree(once) is once

    def test_reconciled_forest_is_returned_as_is(self):
        forest = (make_todo("p", children=[make_todo("a")]), make_todo("q"))
        assert reconcile_tree(forest) is forest

    def test_list_input_kept_when_clean_and_tuple_when_fixed(self):
        clean = [make_todo("p", children=[make_todo("a")])]
        assert reconcile_tree(clean) is clean

        dirty = [make_todo("p", completed=True, children=[make_todo("a")])]
        fixed = reconcile_tree(dirty)
        assert isinstance(fixed, tuple)
        assert fixed[0].completed is False

    def test_untouched_subtrees_are_shared(self):
        clean = make_todo("clean", children=[make_todo("a")])
        dirty = make_todo("dirty", completed=True, children=[make_todo("b")])
        fixed = reconcile_tree((clean, dirty))
        assert fixed[0] is clean
        assert fixed[1] is not dirty


class TestDeepCompletion:
    def test_set_completion_deep_marks_whole_subtree(self):
        todo = make_todo("p", children=[make_todo("a", children=[make_todo("g")])])
        done = set_completion_deep(todo, True)
        assert done.completed
        assert done.children[0].completed
        assert done.children[0].children[0].completed
        assert todo.completed is False

    def test_toggle_child_completes_parent_and_toggle_parent_reopens_all(self):
        forest = reconcile_tree(
            (make_todo("p", children=[make_todo("a", completed=True), make_todo("b")]),)
        )
        assert forest[0].completed is False

        forest, changed = update_todos(forest, "b", toggle_completion)
        assert changed
        assert forest[0].completed is True

        forest, changed = update_todos(forest, "p", toggle_completion)
        assert changed
        assert forest[0].completed is False
        assert [child.completed for child in forest[0].children] == [False, False]
