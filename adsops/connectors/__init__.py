"""HTTP / SDK connectors."""
