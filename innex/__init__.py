"""Small building blocks: an id-keyed slot pool, binary searches, indexed text content, character classification and transform matrices."""

__version__ = "0.1.0"