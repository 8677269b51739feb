"""Built-in commands. Each module defines one Command subclass, picked up by tea.cli.loader."""
