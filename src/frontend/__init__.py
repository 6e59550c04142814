"""Flask web frontend for the search engine (run with `python -m frontend`)."""
