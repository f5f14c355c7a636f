"""Domain layer: entities, field rules and repository contracts."""
