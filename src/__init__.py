"""Rule 110 lattice engine sources."""
