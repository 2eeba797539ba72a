"""smokegen - derive smoke tests for command-line utilities from their manual pages."""
