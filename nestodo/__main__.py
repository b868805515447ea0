"""Allow ``python -m nestodo``."""

from nestodo.interfaces.cli.main import main

main()
