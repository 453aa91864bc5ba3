"""Domain types: the part selector and the parsed invocation arguments."""
