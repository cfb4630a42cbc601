"""Fixed-period generation, lookup and backward iteration."""
