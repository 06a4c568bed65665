"""Infrastructure layer: cross-cutting helpers around rule execution."""
