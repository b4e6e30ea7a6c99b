"""devgraph: seed a Memgraph instance with a small developer/technology graph."""

__version__ = "1.0.0"
