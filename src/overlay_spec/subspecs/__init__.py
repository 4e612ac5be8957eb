"""Subspecifications for the overlay network Python specifications."""
