"""Abstract capabilities consumed by zookit."""
