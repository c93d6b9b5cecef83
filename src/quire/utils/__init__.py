"""Pure helpers shared by the renderer: escaping, attributes, terminal output."""
