"""HTTP routes for the Readiness Assessment."""
