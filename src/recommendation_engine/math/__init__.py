"""Pure calculations: tag heuristics, rolling load, scoring."""
