"""Engine access and shared types."""
