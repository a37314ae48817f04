"""Wishlist App - per-caller set of saved products, keyed by X-User-ID."""
