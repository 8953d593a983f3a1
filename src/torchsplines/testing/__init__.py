"""Testing helpers for torchsplines."""
