"""Host adapters that drive the editor from a UI toolkit."""
