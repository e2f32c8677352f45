"""
Test suite for the zkaccum package

- unit/: individual modules in isolation
- integration/: end-to-end accumulator workflows
"""
