"""Classic data structures and algorithms: stacks, stack-based queues, expressions, a heap, a search tree and graphs."""

__version__ = "0.1.0"