"""Core models shared by the identifier and password packages."""
