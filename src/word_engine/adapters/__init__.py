"""Host front ends for the word editor."""
