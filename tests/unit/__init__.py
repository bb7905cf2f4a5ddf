"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - parsing/: Text chunking and document fetching
    - agent/: Summary configuration, prompt assembly and Gemini calls

Uses mocks for external services. Leverages pytest-check for multiple
assertions per test.
"""
