"""shardsearch — search and scrape the Crystal shard catalogs."""

__version__ = "0.1.0"
