"""Infrastructure layer: MongoDB access for the domain repositories."""
