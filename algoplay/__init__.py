"""Algorithm exercises, thread-coordination patterns and an in-memory Bloom filter."""

__version__ = "0.1.0"