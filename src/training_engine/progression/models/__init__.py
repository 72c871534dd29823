"""Built-in progression models, discovered by ProgressionModelRegistry."""
