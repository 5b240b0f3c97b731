"""HTTP API for catalogtree."""
