"""HTTP surface for International Business."""
