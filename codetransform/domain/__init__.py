"""Domain layer: compile modes, results, the cipher table and the stages."""
