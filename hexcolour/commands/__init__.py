"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by hexcolour.registry.discover().

The explicit imports below keep the modules visible to freezers such as
PyInstaller, where pkgutil.iter_modules cannot find them at runtime.
"""

# Hidden imports: keep this list in sync with command modules
import hexcolour.commands.compose as _compose  # noqa: F401
import hexcolour.commands.decompose as _decompose  # noqa: F401
import hexcolour.commands.palette as _palette  # noqa: F401
import hexcolour.commands.sample as _sample  # noqa: F401
import hexcolour.commands.shade as _shade  # noqa: F401
import hexcolour.commands.swatch as _swatch  # noqa: F401
import hexcolour.commands.tint as _tint  # noqa: F401
