import json

import pytest

from conftest import folder, playlist
from organizer.core.tree import (
    ROOT_ID,
    IllegalMove,
    MalformedTree,
    Node,
    NodeKind,
    TargetNotFound,
    find_by_id,
    insert_at,
    is_descendant,
    iter_nodes,
    load_tree,
    node_from_dict,
    remove,
    tree_from_data,
    tree_to_data,
    validate_tree,
)


class TestNode:
    def test_leaf_cannot_hold_children(self):
        with pytest.raises(MalformedTree):
            Node(id="P1", kind=NodeKind.LEAF, children=(playlist("P2"),))

    def test_children_become_tuple(self):
        node = Node(id="F1", kind=NodeKind.CONTAINER, children=[playlist("P1")])
        assert isinstance(node.children, tuple)

    def test_kind_accepts_plain_string(self):
        assert Node(id="F1", kind="container").is_container

    def test_unknown_kind_is_malformed(self):
        with pytest.raises(MalformedTree):
            Node(id="x", kind="folder")

    def test_empty_container_is_valid(self):
        assert folder("F1").children == ()


class TestLookup:
    def test_find_nested(self, scenario_tree):
        assert find_by_id(scenario_tree, "P1").id == "P1"
        assert find_by_id(scenario_tree, "F1") is scenario_tree[0]

    def test_find_missing(self, scenario_tree):
        assert find_by_id(scenario_tree, "nope") is None

    def test_iter_nodes_parent_before_children(self, scenario_tree):
        assert [n.id for n in iter_nodes(scenario_tree)] == ["F1", "F2", "P1", "P2"]

    def test_is_descendant(self, deep_tree):
        f1 = deep_tree[0]
        assert is_descendant(f1, "F4")
        assert is_descendant(f1, "P1")
        assert not is_descendant(f1, "F1")
        assert not is_descendant(f1, "R2")

    def test_leaf_has_no_descendants(self):
        assert not is_descendant(playlist("P1"), "P1")


class TestRemove:
    def test_remove_nested(self, scenario_tree):
        new_tree, removed = remove(scenario_tree, "P1")
        assert removed == playlist("P1")
        assert new_tree == (folder("F1", folder("F2"), playlist("P2")),)

    def test_remove_root_level(self, deep_tree):
        new_tree, removed = remove(deep_tree, "R2")
        assert removed.id == "R2"
        assert [n.id for n in new_tree] == ["F1"]

    def test_remove_container_takes_subtree(self, scenario_tree):
        new_tree, removed = remove(scenario_tree, "F2")
        assert removed.children == (playlist("P1"),)
        assert find_by_id(new_tree, "P1") is None

    def test_remove_missing_returns_equal_tree(self, scenario_tree):
        new_tree, removed = remove(scenario_tree, "nope")
        assert removed is None
        assert new_tree == scenario_tree

    def test_input_tree_untouched(self, scenario_tree):
        before = tree_to_data(scenario_tree)
        remove(scenario_tree, "P1")
        assert tree_to_data(scenario_tree) == before


class TestInsertAt:
    def test_insert_into_container(self, scenario_tree):
        new_tree = insert_at(scenario_tree, "F2", 0, playlist("P9"))
        assert [c.id for c in find_by_id(new_tree, "F2").children] == ["P9", "P1"]

    def test_insert_into_empty_container(self):
        new_tree = insert_at((folder("F1"),), "F1", 0, playlist("P1"))
        assert new_tree == (folder("F1", playlist("P1")),)

    def test_insert_at_root(self, scenario_tree):
        new_tree = insert_at(scenario_tree, ROOT_ID, 0, playlist("P9"))
        assert [n.id for n in new_tree] == ["P9", "F1"]

    @pytest.mark.parametrize("index, expected", [
        (-5, ["P9", "F2", "P2"]),
        (1, ["F2", "P9", "P2"]),
        (2, ["F2", "P2", "P9"]),
        (99, ["F2", "P2", "P9"]),
    ])
    def test_index_is_clamped(self, scenario_tree, index, expected):
        new_tree = insert_at(scenario_tree, "F1", index, playlist("P9"))
        assert [c.id for c in new_tree[0].children] == expected

    def test_missing_parent(self, scenario_tree):
        with pytest.raises(TargetNotFound):
            insert_at(scenario_tree, "nope", 0, playlist("P9"))

    def test_leaf_parent(self, scenario_tree):
        with pytest.raises(TargetNotFound):
            insert_at(scenario_tree, "P2", 0, playlist("P9"))

    def test_duplicate_id_rejected(self, scenario_tree):
        with pytest.raises(IllegalMove):
            insert_at(scenario_tree, "F2", 0, playlist("P2"))

    def test_untouched_branches_are_shared(self, deep_tree):
        new_tree = insert_at(deep_tree, "R2", 0, playlist("P9"))
        assert new_tree[0] is deep_tree[0]


class TestPlainData:
    def test_round_trip(self, scenario_tree):
        assert tree_from_data(tree_to_data(scenario_tree)) == scenario_tree

    def test_dict_shape(self):
        data = tree_to_data((folder("F1", playlist("P1"), title="Folder 1"),))
        assert data == [{
            "id": "F1",
            "type": "folder",
            "title": "Folder 1",
            "children": [{"id": "P1", "type": "playlist", "title": "P1"}],
        }]

    def test_kind_aliases(self):
        node = node_from_dict({"id": "F1", "kind": "container", "children": [{"id": "P1", "kind": "leaf"}]})
        assert node.is_container
        assert node.children[0].kind is NodeKind.LEAF

    def test_missing_type_infers_from_children(self):
        assert node_from_dict({"id": "F1", "children": []}).is_container
        assert not node_from_dict({"id": "P1"}).is_container

    def test_items_wrapper(self):
        tree = tree_from_data({"items": [{"id": "P1", "type": "playlist"}]})
        assert tree == (Node(id="P1", kind=NodeKind.LEAF),)

    @pytest.mark.parametrize("data", [
        "not a tree",
        [{"id": "", "type": "playlist"}],
        [{"id": "X", "type": "album"}],
        [{"id": "P1", "type": "playlist", "children": [{"id": "P2"}]}],
        [{"id": "P1"}, {"id": "F1", "children": [{"id": "P1"}]}],
        [{"id": ROOT_ID}],
    ])
    def test_malformed(self, data):
        with pytest.raises(MalformedTree):
            tree_from_data(data)

    def test_validate_duplicates(self):
        with pytest.raises(MalformedTree):
            validate_tree((playlist("P1"), folder("F1", playlist("P1"))))


class TestLoadTree:
    def test_load(self, tmp_path, scenario_tree):
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(tree_to_data(scenario_tree)), encoding="utf-8")
        assert load_tree(str(path)) == scenario_tree

    def test_malformed_json_names_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="bad.json"):
            load_tree(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_tree(str(tmp_path / "missing.json"))
