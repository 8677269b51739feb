from __future__ import annotations
import importlib
import pkgutil
from .registry import CommandRegistry, Command, CommandSpec

def discover_commands(registry: CommandRegistry, package_root: str = 'tea.cli.commands') -> None:
    """Register every Command subclass defined in the modules of `package_root`."""
    pkg = importlib.import_module(package_root)
    for modinfo in pkgutil.iter_modules(pkg.__path__):
        module = importlib.import_module(f"{package_root}.{modinfo.name}")
        for attr in dir(module):
            obj = getattr(module, attr)
            if isinstance(obj, type) and issubclass(obj, Command) and obj is not Command and obj.__module__ == module.__name__:
                cmd = obj()
                registry.register(CommandSpec(name=cmd.name, handler=cmd))
