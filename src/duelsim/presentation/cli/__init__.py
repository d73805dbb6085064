"""Console presentation for the scripted session."""
