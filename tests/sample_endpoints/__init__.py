"""Sample endpoint definitions used by the integration tests."""
