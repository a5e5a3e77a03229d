"""ZOOKIT

Test-support core for a ZooKeeper-style coordination client.
It validates node creation modes and ships a small assertion library
that reports failures through a pluggable reporter instead of raising.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
