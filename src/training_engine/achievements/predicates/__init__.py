"""Badge predicates, one module per predicate family."""
