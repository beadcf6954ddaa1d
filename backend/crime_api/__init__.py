"""St. Paul crime incident query API."""
