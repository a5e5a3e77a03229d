"""Unit tests.

Guidelines
- No network or server; file I/O only under tmp_path.
- One test module per source module, grouped in classes where a module has
  several public types.
"""
