"""Command-line entry points: ``find_shard`` and ``crystal_doc``."""
