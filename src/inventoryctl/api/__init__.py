"""HTTP transport — Flask blueprints over the entity services."""
