"""OutletCOGS HTTP API."""
