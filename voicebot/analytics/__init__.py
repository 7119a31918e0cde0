"""Query logging and analytics reports over the store's query log."""
