"""Domain layer: errors, value objects, annotation parsing and record fields."""
