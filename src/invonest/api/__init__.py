"""HTTP API for InvoNest."""
