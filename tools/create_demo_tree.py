import sys
import os
import random
import json
from pathlib import Path
from uuid import uuid4

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from organizer.core.demo import DEMO_TREE

TITLE_WORDS = [
    "Morning", "Evening", "Road Trip", "Focus", "Workout", "Chill", "Party",
    "Jazz", "Classics", "Indie", "Rainy Day", "Summer", "Late Night", "Study",
    "Dinner", "Acoustic", "Throwback", "Discover", "Live", "Covers",
]

def random_title(kind):
    label = random.choice(TITLE_WORDS)
    return f"{label} {'Folder' if kind == 'folder' else 'Mix'}"

def create_node(kind):
    node = {
        'id': f"{kind}-{uuid4().hex[:8]}",
        'type': kind,
        'title': random_title(kind),
    }
    if kind == 'folder':
        node['children'] = []
    return node

def random_tree(count):
    roots = []
    folders = []

    for i in range(count):
        kind = 'folder' if random.random() < 0.3 else 'playlist'
        node = create_node(kind)

        # Roughly one in five nodes lands at the root
        if not folders or random.random() < 0.2:
            roots.append(node)
        else:
            random.choice(folders)['children'].append(node)

        if kind == 'folder':
            folders.append(node)

    return roots

def main():
    if len(sys.argv) not in (2, 3):
        print(f"Usage: {sys.argv[0]} /path/to/tree.json [N]")
        print("Without N the fixed demo tree is written; with N a random tree of N nodes.")
        sys.exit(1)

    out_path = Path(sys.argv[1])
    if out_path.exists() and out_path.is_dir():
        print(f"Error: {out_path} is a directory")
        sys.exit(1)

    if len(sys.argv) == 3:
        count = int(sys.argv[2])
        tree = random_tree(count)
        print(f"Created random tree with {count} nodes")
    else:
        tree = DEMO_TREE
        print("Using demo tree")

    os.makedirs(out_path.parent or ".", exist_ok=True)
    with open(out_path, 'w', encoding='utf-8') as f:
        json.dump(tree, f, indent=2)

    print(f"Wrote {out_path}")

if __name__ == '__main__':
    main()
