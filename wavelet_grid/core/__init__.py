"""Grid container, filters and the grid builder."""
