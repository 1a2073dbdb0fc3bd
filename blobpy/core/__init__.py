"""Core building blocks: transport, upload pipeline, errors and logging."""
