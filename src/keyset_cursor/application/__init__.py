"""Application layer – keyset pagination use cases."""
