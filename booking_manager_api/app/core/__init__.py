"""Core infrastructure: settings, logging, errors and record stores."""
