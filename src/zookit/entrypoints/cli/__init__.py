"""zookit command-line interface."""
