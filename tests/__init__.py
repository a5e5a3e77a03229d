"""zookit test suite.

Folder taxonomy
- unit/  : Isolated, fast checks of a single module/class/function.
- e2e/   : The `zookit` CLI driven through Click's CliRunner.

General guidance
- Assertion helpers are checked against the recording reporter (`recorder`
  fixture) rather than a real test harness.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e (applied by directory), property
"""
