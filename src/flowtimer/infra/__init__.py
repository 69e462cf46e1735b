"""Process infrastructure: settings and logging setup."""
