"""Terminal client for a moodboard REST backend."""
