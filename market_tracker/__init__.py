"""Local Market Tracker API gateway client."""
