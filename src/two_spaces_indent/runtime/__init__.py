"""Runtime services shared by every layer (logging, profiling)."""
