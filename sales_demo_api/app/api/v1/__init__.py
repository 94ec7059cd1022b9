"""Version 1 of the Sales Demo API."""
