"""Election administration API: elections and their polling stations."""
