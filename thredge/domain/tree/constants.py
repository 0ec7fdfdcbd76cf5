"""Reply tree limits."""

# A root entry has depth 1; no entry may have more than MAX_DEPTH - 1 ancestors
MAX_DEPTH = 3

# Gap between consecutive sibling order indexes
ORDER_STEP = 1000
