"""Application layer: builders, the failure protocol, and extension ports."""
