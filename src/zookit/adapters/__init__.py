"""Concrete implementations of zookit interfaces."""
