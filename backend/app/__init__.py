"""Anonymous message board backend."""
