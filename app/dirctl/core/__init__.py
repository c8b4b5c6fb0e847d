"""Core building blocks: errors, configuration, paths and theming."""
