"""Jobly: job board data access over PostgreSQL."""
