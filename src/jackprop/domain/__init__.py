"""Domain layer: validator algebra, action factory, and store binding."""
