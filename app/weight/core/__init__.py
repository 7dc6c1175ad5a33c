"""Core configuration, theming and error types for weight."""
