"""Integer hash tables (open addressing, cuckoo, AVL-tree buckets), an AVL tree, and a timing benchmark."""

__version__ = "0.1.0"