"""Entry points into zookit."""
