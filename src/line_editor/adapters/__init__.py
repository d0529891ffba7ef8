"""Host adapters for the line editor."""
