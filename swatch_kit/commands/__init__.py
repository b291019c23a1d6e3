"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by swatch_kit.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with command modules
import swatch_kit.commands.all as _all  # noqa: F401
import swatch_kit.commands.contrast as _contrast  # noqa: F401
import swatch_kit.commands.convert as _convert  # noqa: F401
import swatch_kit.commands.export as _export  # noqa: F401
import swatch_kit.commands.fix as _fix  # noqa: F401
import swatch_kit.commands.harmony as _harmony  # noqa: F401
import swatch_kit.commands.name as _name  # noqa: F401
import swatch_kit.commands.sample as _sample  # noqa: F401
import swatch_kit.commands.similar as _similar  # noqa: F401
import swatch_kit.commands.tints as _tints  # noqa: F401
