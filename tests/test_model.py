from organizer.core.tree import ROOT_ID
from organizer.ui.index import InsertionIndex
from organizer.ui.constants import INDENT_W
from organizer.ui.model import CollapseState, flatten_tree, indent_px, visible_insertion_points
from organizer.ui.types import Row


class TestFlattenTree:
    def test_all_expanded(self, scenario_tree):
        assert flatten_tree(scenario_tree) == [
            Row("folder", "F1", 0),
            Row("folder", "F2", 1),
            Row("playlist", "P1", 2),
            Row("playlist", "P2", 1),
        ]

    def test_collapsed_hides_descendants(self, scenario_tree):
        rows = flatten_tree(scenario_tree, collapsed={"F2"})
        assert [r.node_id for r in rows] == ["F1", "F2", "P2"]

    def test_collapse_state_object(self, deep_tree):
        state = CollapseState(["F1"])
        assert [r.node_id for r in flatten_tree(deep_tree, state)] == ["F1", "R2"]


class TestCollapseState:
    def test_set_and_toggle(self, scenario_tree):
        state = CollapseState()
        assert state.set_collapsed(scenario_tree, "F2", True)
        assert not state.set_collapsed(scenario_tree, "F2", True)
        assert state.is_collapsed("F2")
        assert state.toggle_collapsed(scenario_tree, "F2")
        assert not state.is_collapsed("F2")

    def test_leaves_and_unknown_ids_ignored(self, scenario_tree):
        state = CollapseState()
        assert not state.set_collapsed(scenario_tree, "P1", True)
        assert not state.toggle_collapsed(scenario_tree, "nope")
        assert state.ids() == set()

    def test_prune(self, scenario_tree):
        state = CollapseState(["F2", "gone"])
        state.prune(scenario_tree)
        assert state.ids() == {"F2"}


class TestVisibleInsertionPoints:
    def test_everything_visible_when_expanded(self, scenario_tree):
        index = InsertionIndex(scenario_tree)
        assert visible_insertion_points(index, scenario_tree) == index.points

    def test_collapsed_container_hides_its_points(self, scenario_tree):
        index = InsertionIndex(scenario_tree)
        visible = visible_insertion_points(index, scenario_tree, {"F2"})
        assert {p.parent_id for p in visible} == {ROOT_ID, "F1"}

    def test_collapsed_ancestor_hides_nested_points(self, deep_tree):
        index = InsertionIndex(deep_tree)
        visible = visible_insertion_points(index, deep_tree, CollapseState(["F2"]))
        assert {p.parent_id for p in visible} == {ROOT_ID, "F1", "R2"}

    def test_index_itself_is_unfiltered(self, scenario_tree):
        index = InsertionIndex(scenario_tree)
        visible_insertion_points(index, scenario_tree, {"F1"})
        assert len(index.points_for("F2")) == 2


def test_indent_px(scenario_tree):
    index = InsertionIndex(scenario_tree)
    assert indent_px(index.points_for("F2")[0]) == 2 * INDENT_W
    assert indent_px(flatten_tree(scenario_tree)[0]) == 0
