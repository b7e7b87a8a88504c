"""Developer tooling that is not part of the public API."""
