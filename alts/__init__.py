"""alts - priority-based alternatives manager."""
