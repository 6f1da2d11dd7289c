"""Root conftest: lets pytest import connectfour from a source checkout."""
