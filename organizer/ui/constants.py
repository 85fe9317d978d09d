'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Insertion point keys look like "<parent_id>-insertion-<index>"
INSERTION_KEY_SEP = "-insertion-"

# Shared presentation constants
INDENT_W = 20
