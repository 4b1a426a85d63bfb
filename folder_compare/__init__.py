"""
Folder Compare - A CLI tool to validate that a copy, backup or migration of a
folder tree completed without loss.

Features:
- Whole-tree summary (total size, file and directory counts)
- Per-directory size comparison down to a chosen depth
- File type counts for a list of extensions
- Presence check of every file on both sides
- Deep scan of sizes and file counts per subfolder
- Exclusion patterns (.DS_Store is always excluded)
- CSV reports and a run log
"""

__version__ = "1.0.0"
