"""REST API serving the remote note service."""
