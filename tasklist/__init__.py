"""Task list API: authenticated personal task tracking."""
