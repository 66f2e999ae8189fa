"""CBS Backend: core banking demo API."""
