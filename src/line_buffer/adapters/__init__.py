"""Host adapters that capture input and render snapshots."""
