"""Search algorithms: the pruning bound and the longest simple path search."""
