"""Pure transformations over returns and price series."""
