"""Site builder API service."""
