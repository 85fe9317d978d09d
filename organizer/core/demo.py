from __future__ import annotations

from organizer.core.tree import Tree, tree_from_data

# Demo data: folders have a children list, playlists do not.
DEMO_TREE = [
    {
        "id": "folder-1",
        "type": "folder",
        "title": "Folder 1",
        "children": [
            {
                "id": "folder-2",
                "type": "folder",
                "title": "Subfolder 1",
                "children": [
                    {"id": "playlist-1", "type": "playlist", "title": "Playlist 1"},
                ],
            },
            {"id": "playlist-2", "type": "playlist", "title": "Playlist 2"},
        ],
    },
    {
        "id": "folder-3",
        "type": "folder",
        "title": "Folder 2",
        "children": [
            {"id": "playlist-3", "type": "playlist", "title": "Playlist 3"},
        ],
    },
    {
        "id": "folder-4",
        "type": "folder",
        "title": "Folder 3",
        "children": [
            {"id": "playlist-4", "type": "playlist", "title": "Playlist 4"},
        ],
    },
]

def demo_tree() -> Tree:
    return tree_from_data(DEMO_TREE)
