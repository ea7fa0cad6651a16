"""
Validation and regression tests for signal-db

Test coverage:
- Signal strength (inverse-square, zero-distance passthrough)
- Capacity limits and in-place editing through indexed access
- Bubble sort permutation and ascending order
- Binary search hits, misses and duplicate frequencies
- Power range queries
- Text format dump/load, truncation and open failures
- SQLite manifest export
- Console rendering and the demo walkthrough
"""
